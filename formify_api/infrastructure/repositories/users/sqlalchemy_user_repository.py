# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from formify_api.domain.users.entities import Profile
from formify_api.domain.users.entities import UserAccount as DomainUser
from formify_api.domain.users.exceptions import DuplicateEmailError
from formify_api.domain.users.repositories import ProfileRepository, UserRepository
from formify_api.infrastructure.db import Database
from formify_api.infrastructure.db.models import User, UserProfile
from formify_api.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        password_hash=row.password_hash,
        created_at=row.created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, db: Database) -> None:
        self._db = db

    def find_by_email(self, email: str) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.scalars(select(User).where(User.email == email)).first()
            if not row:
                return None
            return _to_domain(row)

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with self._db.session_scope() as session:
            row = session.get(User, user_id)
            if not row:
                return None
            return _to_domain(row)

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with self._db.session_scope() as session:
                row = User(
                    first_name=user.first_name,
                    last_name=user.last_name,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except IntegrityError as exc:
            # A concurrent signup won the race past find_by_email.
            logger.info("users.add: unique email constraint hit")
            raise DuplicateEmailError() from exc

    def count(self) -> int:
        with self._db.session_scope() as session:
            return int(session.scalar(select(func.count()).select_from(User)) or 0)


class SqlAlchemyProfileRepository(ProfileRepository):
    """Profiles stored as one JSON document per user.

    ``upsert`` replaces each listed top-level field wholesale and keeps the
    others; nested objects are never merged.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    def find_by_user_id(self, user_id: int) -> Profile | None:
        with self._db.session_scope() as session:
            row = session.scalars(
                select(UserProfile).where(UserProfile.user_id == user_id)
            ).first()
            if not row:
                return None
            return Profile(user_id=row.user_id, data=dict(row.document or {}))

    def upsert(self, user_id: int, fields: Mapping[str, Any]) -> Profile:
        try:
            return self._upsert_once(user_id, fields)
        except IntegrityError:
            # Lost an insert race for the same user; the row exists now.
            logger.info(f"profiles.upsert: retrying as update user_id={user_id}")
            return self._upsert_once(user_id, fields)

    def _upsert_once(self, user_id: int, fields: Mapping[str, Any]) -> Profile:
        with self._db.session_scope() as session:
            row = session.scalars(
                select(UserProfile).where(UserProfile.user_id == user_id)
            ).first()
            if row is None:
                row = UserProfile(user_id=user_id, document=dict(fields))
                session.add(row)
            else:
                row.document = {**(row.document or {}), **fields}
            session.flush()
            return Profile(user_id=user_id, data=dict(row.document))
