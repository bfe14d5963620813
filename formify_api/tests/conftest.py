from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from flask import Flask
from flask.testing import FlaskClient

from formify_api.app import create_app
from formify_api.container import Container
from formify_api.infrastructure.db import Database
from formify_api.shared.config import (
    AppConfig,
    AuthConfig,
    DatabaseConfig,
    MailConfig,
    SecurityConfig,
)

TEST_SECRET = "test-secret-0123456789abcdef0123456789"
# Cheap but real salted hashing for tests.
FAST_HASH_METHOD = "pbkdf2:sha256:1000"


class MutableClock:
    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime.now(UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


class RecordingMailer:
    def __init__(self) -> None:
        self.sent: list[dict[str, str]] = []
        self.error: Exception | None = None

    def send(self, *, to: str, subject: str, html: str) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append({"to": to, "subject": subject, "html": html})


@pytest.fixture()
def config() -> AppConfig:
    return AppConfig(
        _env_file=None,
        APP_ENV="test",
        database=DatabaseConfig(_env_file=None, DATABASE_URL="sqlite://"),
        auth=AuthConfig(
            _env_file=None,
            JWT_SECRET=TEST_SECRET,
            PASSWORD_HASH_METHOD=FAST_HASH_METHOD,
        ),
        mail=MailConfig(_env_file=None, EMAIL_USER="hello@formifyx.nl", EMAIL_PASS="app-pass"),
        security=SecurityConfig(_env_file=None),
    )


@pytest.fixture()
def db(config: AppConfig):
    database = Database.from_config(config.database)
    database.init_db()
    yield database
    database.drop_all()
    database.dispose()


@pytest.fixture()
def clock() -> MutableClock:
    return MutableClock()


@pytest.fixture()
def mailer() -> RecordingMailer:
    return RecordingMailer()


@pytest.fixture()
def container(
    config: AppConfig, db: Database, mailer: RecordingMailer, clock: MutableClock
) -> Container:
    return Container(config, db=db, mailer=mailer, clock=clock)


@pytest.fixture()
def app(container: Container) -> Flask:
    return create_app(container=container)


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    return app.test_client()
