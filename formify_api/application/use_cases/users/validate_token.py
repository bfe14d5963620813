# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from formify_api.domain.users.entities import UserAccount
from formify_api.domain.users.exceptions import MissingTokenError, UserNotFoundError
from formify_api.domain.users.repositories import TokenService, UserRepository
from formify_api.shared.errors import internal_errors


def authenticate(tokens: TokenService, token: str | None) -> int:
    """Return the user id carried by a bearer token."""
    if not token:
        raise MissingTokenError()
    return tokens.verify(token)


class ValidateTokenUseCase:
    def __init__(self, *, users: UserRepository, tokens: TokenService) -> None:
        self._users = users
        self._tokens = tokens

    def execute(self, token: str | None) -> UserAccount:
        user_id = authenticate(self._tokens, token)

        with internal_errors("auth.validate"):
            user = self._users.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user
