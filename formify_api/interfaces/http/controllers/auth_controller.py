# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from formify_api.application.use_cases.users.login_user import LoginUserUseCase
from formify_api.application.use_cases.users.signup_user import SignupUserUseCase
from formify_api.application.use_cases.users.validate_token import ValidateTokenUseCase
from formify_api.domain.users.exceptions import InvalidCredentialsError
from formify_api.interfaces.http.bearer import bearer_token
from formify_api.interfaces.http.dto.auth import (
    LoginRequestDTO,
    LoginResponseDTO,
    MessageDTO,
    SignupRequestDTO,
    UserSummaryDTO,
    ValidateTokenResponseDTO,
)
from formify_api.interfaces.http.payload import request_payload
from formify_api.shared.errors.validation import raise_validation_error


class AuthController:
    def __init__(
        self,
        *,
        signup_use_case: SignupUserUseCase,
        login_use_case: LoginUserUseCase,
        validate_token_use_case: ValidateTokenUseCase,
    ) -> None:
        self._signup_use_case = signup_use_case
        self._login_use_case = login_use_case
        self._validate_token_use_case = validate_token_use_case

    def signup(self) -> tuple[Response, int]:
        try:
            dto = SignupRequestDTO.model_validate(request_payload())
        except ValidationError as exc:
            raise_validation_error(exc, "All fields are required")

        self._signup_use_case.execute(dto.first_name, dto.last_name, dto.email, dto.password)

        payload = MessageDTO(message="User created successfully").model_dump()
        return jsonify(payload), 201

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request_payload())
        except ValidationError as exc:
            raise InvalidCredentialsError() from exc

        result = self._login_use_case.execute(dto.email, dto.password)

        payload = LoginResponseDTO(
            token=result.token,
            first_name=result.first_name,
            last_name=result.last_name,
        ).model_dump(by_alias=True)
        return jsonify(payload), 200

    def validate_token(self) -> tuple[Response, int]:
        user = self._validate_token_use_case.execute(bearer_token())

        payload = ValidateTokenResponseDTO(
            user=UserSummaryDTO(first_name=user.first_name, last_name=user.last_name)
        ).model_dump(by_alias=True)
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__)
        bp.add_url_rule("/signup", view_func=self.signup, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/validate-token", view_func=self.validate_token, methods=["POST"])
        return bp
