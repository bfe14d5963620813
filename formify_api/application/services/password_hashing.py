"""Password hashing strategies."""

from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from formify_api.domain.users.repositories import PasswordHasher

DEFAULT_METHOD = "scrypt:32768:8:1"
DEFAULT_SALT_LENGTH = 16


class WerkzeugPasswordHasher(PasswordHasher):
    """Salted one-way hashing backed by werkzeug.

    The method string pins the cost parameters, so every stored hash carries
    the exact recipe used to produce it, e.g.
    ``scrypt:32768:8:1$<salt>$<hex digest>``.
    """

    def __init__(
        self,
        method: str = DEFAULT_METHOD,
        salt_length: int = DEFAULT_SALT_LENGTH,
    ) -> None:
        self._method = method
        self._salt_length = salt_length

    def hash(self, password: str) -> str:
        return str(
            generate_password_hash(password, method=self._method, salt_length=self._salt_length)
        )

    def verify(self, password: str, hashed: str) -> bool:
        if not isinstance(password, str) or not isinstance(hashed, str) or not hashed:
            return False
        try:
            return bool(check_password_hash(hashed, password))
        except (ValueError, TypeError):
            # Unknown method or malformed parameters in the stored hash.
            return False
