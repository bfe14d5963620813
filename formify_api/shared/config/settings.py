# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_ALLOWED_ORIGINS = [
    "https://formifyx.nl",
    "http://localhost:5173",
    "https://formifyx-frontend.onrender.com",
]


_NESTED_SETTINGS = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
    validate_by_name=True,
)


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///formify.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")
    echo: bool = Field(False, alias="DATABASE_ECHO")

    model_config = _NESTED_SETTINGS


class AuthConfig(BaseSettings):
    # No default: the service must not start without a signing secret.
    jwt_secret: str = Field(alias="JWT_SECRET", min_length=1)
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    token_lifetime_seconds: int = Field(3600, ge=1, alias="TOKEN_LIFETIME_SECONDS")
    password_hash_method: str = Field("scrypt:32768:8:1", alias="PASSWORD_HASH_METHOD")
    password_salt_length: int = Field(16, ge=8, alias="PASSWORD_SALT_LENGTH")

    model_config = _NESTED_SETTINGS

    @field_validator("jwt_algorithm")
    @classmethod
    def _only_hmac(cls, value: str) -> str:
        if value not in ("HS256", "HS384", "HS512"):
            raise ValueError("JWT_ALGORITHM must be one of HS256, HS384, HS512")
        return value


class MailConfig(BaseSettings):
    user: str = Field("", alias="EMAIL_USER")
    password: str = Field("", alias="EMAIL_PASS")
    host: str = Field("smtp.gmail.com", alias="SMTP_HOST")
    port: int = Field(587, ge=1, le=65535, alias="SMTP_PORT")
    use_tls: bool = Field(True, alias="SMTP_USE_TLS")
    timeout: float = Field(15.0, ge=0.1, alias="SMTP_TIMEOUT")
    retries: int = Field(2, ge=0, alias="SMTP_RETRIES")
    backoff_base: float = Field(0.5, ge=0.0, alias="SMTP_BACKOFF_BASE")
    site_url: str = Field("https://formifyx.nl", alias="SITE_URL")

    model_config = _NESTED_SETTINGS

    @field_validator("use_tls", mode="before")
    @classmethod
    def _parse_tls(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class SecurityConfig(BaseSettings):
    allowed_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_ORIGINS), alias="ALLOWED_ORIGINS"
    )
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")
    max_content_length: int = Field(10 * 1024 * 1024, ge=1, alias="MAX_CONTENT_LENGTH")

    model_config = _NESTED_SETTINGS

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_hsts(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _auth_config_factory() -> AuthConfig:
    return AuthConfig()  # type: ignore[call-arg]


def _mail_config_factory() -> MailConfig:
    return MailConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    port: int = Field(5000, ge=1, le=65535, alias="PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    log_level: str = Field("INFO", alias="LOG_LEVEL")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    auth: AuthConfig = Field(default_factory=_auth_config_factory)
    mail: MailConfig = Field(default_factory=_mail_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        validate_assignment=True,
        extra="ignore",
        validate_by_name=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if len(self.auth.jwt_secret) < 32:
            print(
                "\n⚠️  JWT_SECRET is shorter than 32 characters.\n"
                "   Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(32))\"\n",
                file=sys.stderr,
            )
        if not self.mail.user or not self.mail.password:
            print("⚠️  EMAIL_USER/EMAIL_PASS are not set; /subscribe will fail", file=sys.stderr)
        if not self.security.enable_hsts:
            print("⚠️  HSTS is DISABLED (recommended for HTTPS)", file=sys.stderr)

        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = [
    "AppConfig",
    "AuthConfig",
    "DatabaseConfig",
    "MailConfig",
    "SecurityConfig",
    "load_config",
]
