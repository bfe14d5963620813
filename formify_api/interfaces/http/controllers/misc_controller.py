# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, jsonify

from formify_api.infrastructure.db import Database
from formify_api.infrastructure.health import check_database
from formify_api.shared.logging import logger


class MiscController:
    def __init__(self, *, db: Database) -> None:
        self._db = db

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/api/health", view_func=self.health, methods=["GET"])
        return bp

    def index(self):
        return "Welcome to FormifyX Backend!"

    def health(self):
        status: dict[str, object] = {"ok": True}
        try:
            check_database(self._db)
            status["database"] = "ok"
        except Exception as exc:
            logger.error(f"health: database check failed: {type(exc).__name__}")
            status["ok"] = False
            status["database"] = "error"
        return jsonify(status)
