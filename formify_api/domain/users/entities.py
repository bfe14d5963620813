# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(slots=True, frozen=True)
class UserAccount:

    id: int
    first_name: str
    last_name: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class Profile:
    """Profile document owned by a single user.

    ``data`` holds the document fields in their wire shape (``firstName``,
    ``company``...); ``user_id`` is kept apart so a request body can never
    move a profile to another user.
    """

    user_id: int
    data: dict[str, Any] = field(default_factory=dict)

    def to_document(self) -> dict[str, Any]:
        return {**self.data, "userId": self.user_id}


@dataclass(slots=True, frozen=True)
class SessionClaims:

    subject_id: int
    issued_at: datetime
    expires_at: datetime
