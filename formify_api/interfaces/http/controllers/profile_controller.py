# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from formify_api.application.use_cases.users.profile import GetProfileUseCase, UpdateProfileUseCase
from formify_api.interfaces.http.bearer import bearer_token
from formify_api.interfaces.http.dto.profile import ProfileUpdateDTO
from formify_api.interfaces.http.payload import request_payload
from formify_api.shared.errors.validation import raise_validation_error


class ProfileController:
    def __init__(
        self,
        *,
        get_profile_use_case: GetProfileUseCase,
        update_profile_use_case: UpdateProfileUseCase,
    ) -> None:
        self._get_profile_use_case = get_profile_use_case
        self._update_profile_use_case = update_profile_use_case

    def get_profile(self) -> tuple[Response, int]:
        profile = self._get_profile_use_case.execute(bearer_token())
        return jsonify(profile.to_document()), 200

    def update_profile(self) -> tuple[Response, int]:
        user_id = self._update_profile_use_case.authorize(bearer_token())

        try:
            dto = ProfileUpdateDTO.model_validate(request_payload())
        except ValidationError as exc:
            raise_validation_error(exc, "Invalid profile data")

        profile = self._update_profile_use_case.apply(user_id, dto.listed_fields())
        return jsonify(profile.to_document()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("profile", __name__, url_prefix="/api")
        bp.add_url_rule("/profile", view_func=self.get_profile, methods=["GET"])
        bp.add_url_rule("/profile", view_func=self.update_profile, methods=["PUT"])
        return bp
