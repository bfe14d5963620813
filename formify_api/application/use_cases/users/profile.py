# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from formify_api.application.use_cases.users.validate_token import authenticate
from formify_api.domain.users.entities import Profile
from formify_api.domain.users.exceptions import ProfileNotFoundError
from formify_api.domain.users.repositories import ProfileRepository, TokenService
from formify_api.shared.errors import internal_errors
from formify_api.shared.logging import logger


class GetProfileUseCase:
    def __init__(self, *, profiles: ProfileRepository, tokens: TokenService) -> None:
        self._profiles = profiles
        self._tokens = tokens

    def execute(self, token: str | None) -> Profile:
        user_id = authenticate(self._tokens, token)

        with internal_errors("profile.get", "Failed to fetch profile"):
            profile = self._profiles.find_by_user_id(user_id)
        if profile is None:
            raise ProfileNotFoundError()
        return profile


class UpdateProfileUseCase:
    """Create or update the caller's profile.

    Top-level fields present in ``fields`` replace the stored values as a
    whole; a partial ``company`` object therefore drops the nested keys it
    does not repeat.
    """

    def __init__(self, *, profiles: ProfileRepository, tokens: TokenService) -> None:
        self._profiles = profiles
        self._tokens = tokens

    def authorize(self, token: str | None) -> int:
        return authenticate(self._tokens, token)

    def apply(self, user_id: int, fields: Mapping[str, Any]) -> Profile:
        with internal_errors("profile.update", "Failed to update profile"):
            profile = self._profiles.upsert(user_id, fields)

        logger.info(f"profile.update: ok user_id={user_id} fields={sorted(fields)}")
        return profile

    def execute(self, token: str | None, fields: Mapping[str, Any]) -> Profile:
        return self.apply(self.authorize(token), fields)
