from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from formify_api.application.services.tokens import JwtTokenService
from formify_api.domain.users.exceptions import InvalidTokenError

SECRET = "unit-test-secret-0123456789abcdef"


class FixedClock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock(datetime(2026, 10, 19, 12, 0, tzinfo=UTC))


@pytest.fixture()
def tokens(clock: FixedClock) -> JwtTokenService:
    return JwtTokenService(SECRET, clock=clock)


def test_issue_then_verify_returns_subject(tokens: JwtTokenService) -> None:
    token = tokens.issue(42)

    assert tokens.verify(token) == 42


def test_token_carries_one_hour_lifetime(tokens: JwtTokenService, clock: FixedClock) -> None:
    claims = tokens.decode(tokens.issue(7))

    assert claims.subject_id == 7
    assert claims.issued_at == clock.now
    assert claims.expires_at - claims.issued_at == timedelta(hours=1)


def test_token_valid_until_just_before_expiry(tokens: JwtTokenService, clock: FixedClock) -> None:
    token = tokens.issue(1)

    clock.now += timedelta(minutes=59, seconds=59)
    assert tokens.verify(token) == 1


def test_expired_token_is_rejected(tokens: JwtTokenService, clock: FixedClock) -> None:
    token = tokens.issue(1)

    clock.now += timedelta(hours=1)
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_token_signed_with_other_secret_is_rejected(
    tokens: JwtTokenService, clock: FixedClock
) -> None:
    foreign = JwtTokenService("another-secret-0123456789abcdef", clock=clock).issue(1)

    with pytest.raises(InvalidTokenError):
        tokens.verify(foreign)


def test_tampered_payload_is_rejected(tokens: JwtTokenService) -> None:
    header, _payload, signature = tokens.issue(1).split(".")
    forged_payload = jwt.utils.base64url_encode(b'{"sub":"2","iat":0,"exp":9999999999}').decode()

    with pytest.raises(InvalidTokenError):
        tokens.verify(f"{header}.{forged_payload}.{signature}")


@pytest.mark.parametrize("garbage", ["", "abc", "a.b.c", "Bearer x", None])
def test_malformed_token_is_rejected(tokens: JwtTokenService, garbage) -> None:
    with pytest.raises(InvalidTokenError):
        tokens.verify(garbage)


def test_missing_claims_are_rejected(tokens: JwtTokenService) -> None:
    token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_non_numeric_subject_is_rejected(tokens: JwtTokenService, clock: FixedClock) -> None:
    token = jwt.encode(
        {"sub": "alice", "iat": clock.now, "exp": clock.now + timedelta(hours=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_unsigned_token_is_rejected(tokens: JwtTokenService, clock: FixedClock) -> None:
    token = jwt.encode(
        {"sub": "1", "iat": clock.now, "exp": clock.now + timedelta(hours=1)},
        None,
        algorithm="none",
    )

    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_all_failures_look_the_same(tokens: JwtTokenService, clock: FixedClock) -> None:
    expired = tokens.issue(1)
    foreign = JwtTokenService("another-secret-0123456789abcdef", clock=clock).issue(1)
    clock.now += timedelta(hours=2)

    errors = []
    for token in (expired, foreign, "garbage"):
        with pytest.raises(InvalidTokenError) as info:
            tokens.verify(token)
        errors.append(info.value.to_dict())

    assert errors[0] == errors[1] == errors[2] == {
        "error": "invalid_token",
        "message": "Invalid token",
    }


def test_empty_secret_refused() -> None:
    with pytest.raises(ValueError):
        JwtTokenService("")
