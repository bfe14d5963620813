from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_PROFILE_CONFIG = ConfigDict(
    str_strip_whitespace=True,
    validate_by_name=True,
    extra="ignore",
)


class AddressDTO(BaseModel):
    model_config = _PROFILE_CONFIG

    street: str | None = None
    number: str | None = None
    postcode: str | None = None
    city: str | None = None


class CompanyDTO(BaseModel):
    model_config = _PROFILE_CONFIG

    name: str | None = None
    email: str | None = None
    logo: str | None = None
    phone: str | None = None
    website: str | None = None
    vat_number: str | None = Field(None, alias="vatNumber")
    kvk_number: str | None = Field(None, alias="kvkNumber")
    bank_account: str | None = Field(None, alias="bankAccount")
    bank_name: str | None = Field(None, alias="bankName")
    address: AddressDTO | None = None


class ProfileUpdateDTO(BaseModel):
    """Accepted profile fields; unknown keys (``userId`` included) are dropped."""

    model_config = _PROFILE_CONFIG

    first_name: str | None = Field(None, alias="firstName")
    last_name: str | None = Field(None, alias="lastName")
    company: CompanyDTO | None = None

    def listed_fields(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)
