# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from formify_api.domain.users.entities import UserAccount
from formify_api.domain.users.exceptions import DuplicateEmailError
from formify_api.domain.users.repositories import PasswordHasher, UserRepository
from formify_api.shared.errors import ValidationError, internal_errors
from formify_api.shared.logging import logger


def normalize_email(email: str) -> str:
    return email.strip().lower()


class SignupUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, first_name: str, last_name: str, email: str, password: str) -> UserAccount:
        first_name = (first_name or "").strip()
        last_name = (last_name or "").strip()
        email = normalize_email(email or "")
        if not (first_name and last_name and email) or not password:
            raise ValidationError("All fields are required")

        with internal_errors("auth.signup"):
            if self._users.find_by_email(email) is not None:
                raise DuplicateEmailError()

            hashed = self._password_hasher.hash(password)
            user = UserAccount(
                id=0,
                first_name=first_name,
                last_name=last_name,
                email=email,
                password_hash=hashed,
                created_at=datetime.now(UTC),
            )
            persisted = self._users.add(user)

        logger.info(f"auth.signup: created user_id={persisted.id}")
        return persisted
