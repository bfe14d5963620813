# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify
from pydantic import ValidationError

from formify_api.application.use_cases.users.subscribe_newsletter import (
    SubscribeNewsletterUseCase,
)
from formify_api.interfaces.http.dto.auth import MessageDTO, SubscribeRequestDTO
from formify_api.interfaces.http.payload import request_payload
from formify_api.shared.errors.validation import raise_validation_error


class NewsletterController:
    def __init__(self, *, subscribe_use_case: SubscribeNewsletterUseCase) -> None:
        self._subscribe_use_case = subscribe_use_case

    def subscribe(self) -> tuple[Response, int]:
        try:
            dto = SubscribeRequestDTO.model_validate(request_payload())
        except ValidationError as exc:
            raise_validation_error(exc, "Email is required")

        self._subscribe_use_case.execute(dto.email)

        payload = MessageDTO(message="Subscription successful! Check your email.").model_dump()
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("newsletter", __name__)
        bp.add_url_rule("/subscribe", view_func=self.subscribe, methods=["POST"])
        return bp
