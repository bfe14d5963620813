# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from .entities import Profile, UserAccount


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> UserAccount | None: ...
    def find_by_id(self, user_id: int) -> UserAccount | None: ...
    def add(self, user: UserAccount) -> UserAccount: ...
    def count(self) -> int: ...


class ProfileRepository(Protocol):
    def find_by_user_id(self, user_id: int) -> Profile | None: ...
    def upsert(self, user_id: int, fields: Mapping[str, Any]) -> Profile: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenService(Protocol):
    def issue(self, subject_id: int) -> str: ...
    def verify(self, token: str) -> int: ...


class Mailer(Protocol):
    def send(self, *, to: str, subject: str, html: str) -> None: ...
