"""Stateless session tokens (HS256 JWT)."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import jwt

from formify_api.domain.users.entities import SessionClaims
from formify_api.domain.users.exceptions import InvalidTokenError
from formify_api.domain.users.repositories import TokenService

DEFAULT_LIFETIME = timedelta(hours=1)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class JwtTokenService(TokenService):
    """Issues and verifies signed, expiring session tokens.

    Holds no state besides the secret; every verification failure raises the
    same ``InvalidTokenError`` whatever the underlying cause.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        lifetime: timedelta = DEFAULT_LIFETIME,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._lifetime = lifetime
        self._clock = clock or _utcnow

    @property
    def lifetime(self) -> timedelta:
        return self._lifetime

    def issue(self, subject_id: int) -> str:
        issued_at = self._clock()
        payload = {
            "sub": str(subject_id),
            "iat": issued_at,
            "exp": issued_at + self._lifetime,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> SessionClaims:
        if not isinstance(token, str) or not token:
            raise InvalidTokenError()
        try:
            data = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                # Time claims are checked below against the injected clock.
                options={
                    "require": ["sub", "iat", "exp"],
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
            claims = SessionClaims(
                subject_id=int(data["sub"]),
                issued_at=datetime.fromtimestamp(data["iat"], UTC),
                expires_at=datetime.fromtimestamp(data["exp"], UTC),
            )
        except (jwt.PyJWTError, TypeError, ValueError, OverflowError, OSError) as exc:
            raise InvalidTokenError() from exc

        if self._clock() >= claims.expires_at:
            raise InvalidTokenError()
        return claims

    def verify(self, token: str) -> int:
        return self.decode(token).subject_id
