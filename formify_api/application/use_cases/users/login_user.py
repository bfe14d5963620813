# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass

from formify_api.application.use_cases.users.signup_user import normalize_email
from formify_api.domain.users.exceptions import InvalidCredentialsError
from formify_api.domain.users.repositories import PasswordHasher, TokenService, UserRepository
from formify_api.shared.errors import internal_errors
from formify_api.shared.logging import logger


@dataclass(slots=True, frozen=True)
class LoginResult:
    token: str
    first_name: str
    last_name: str


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._tokens = tokens

    def execute(self, email: str, password: str) -> LoginResult:
        if not email or not password:
            raise InvalidCredentialsError()

        with internal_errors("auth.login"):
            user = self._users.find_by_email(normalize_email(email))
            password_valid = user is not None and self._password_hasher.verify(
                password, user.password_hash
            )
            if not password_valid:
                logger.info("auth.login: rejected credentials")
                raise InvalidCredentialsError()

            token = self._tokens.issue(user.id)

        logger.info(f"auth.login: ok user_id={user.id}")
        return LoginResult(token=token, first_name=user.first_name, last_name=user.last_name)
