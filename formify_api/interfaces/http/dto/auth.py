from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=128)]


class SignupRequestDTO(BaseModel):
    # Passwords are hashed exactly as sent; only names and email are trimmed.
    model_config = ConfigDict(validate_by_name=True, extra="ignore")

    first_name: Name = Field(alias="firstName")
    last_name: Name = Field(alias="lastName")
    email: Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=320)]
    password: str = Field(min_length=1, max_length=1024)


class LoginRequestDTO(BaseModel):
    # Lenient on purpose: anything unusable is reported as bad credentials.
    model_config = ConfigDict(extra="ignore")

    email: str = ""
    password: str = ""


class SubscribeRequestDTO(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    email: str = Field(min_length=1, max_length=320)


class MessageDTO(BaseModel):
    message: str


class LoginResponseDTO(BaseModel):
    model_config = ConfigDict(validate_by_name=True)

    token: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")


class UserSummaryDTO(BaseModel):
    model_config = ConfigDict(validate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")


class ValidateTokenResponseDTO(BaseModel):
    user: UserSummaryDTO
