"""Application dependency container."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from functools import cached_property

from formify_api.application.services.password_hashing import WerkzeugPasswordHasher
from formify_api.application.services.tokens import JwtTokenService
from formify_api.application.use_cases.users.login_user import LoginUserUseCase
from formify_api.application.use_cases.users.profile import (
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from formify_api.application.use_cases.users.signup_user import SignupUserUseCase
from formify_api.application.use_cases.users.subscribe_newsletter import (
    SubscribeNewsletterUseCase,
)
from formify_api.application.use_cases.users.validate_token import ValidateTokenUseCase
from formify_api.domain.users.repositories import Mailer
from formify_api.infrastructure.db import Database
from formify_api.infrastructure.mail import SmtpMailer
from formify_api.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyProfileRepository,
    SqlAlchemyUserRepository,
)
from formify_api.interfaces.http.controllers.auth_controller import AuthController
from formify_api.interfaces.http.controllers.misc_controller import MiscController
from formify_api.interfaces.http.controllers.newsletter_controller import NewsletterController
from formify_api.interfaces.http.controllers.profile_controller import ProfileController
from formify_api.shared.config import AppConfig


class Container:
    """Builds every collaborator from one explicit ``AppConfig``."""

    def __init__(
        self,
        config: AppConfig,
        *,
        db: Database | None = None,
        mailer: Mailer | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.config = config
        self._db = db
        self._mailer = mailer
        self._clock = clock

    @cached_property
    def db(self) -> Database:
        return self._db or Database.from_config(self.config.database)

    @cached_property
    def mailer(self) -> Mailer:
        return self._mailer or SmtpMailer(self.config.mail)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(
            method=self.config.auth.password_hash_method,
            salt_length=self.config.auth.password_salt_length,
        )

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            self.config.auth.jwt_secret,
            algorithm=self.config.auth.jwt_algorithm,
            lifetime=timedelta(seconds=self.config.auth.token_lifetime_seconds),
            clock=self._clock,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.db)

    @cached_property
    def profile_repository(self) -> SqlAlchemyProfileRepository:
        return SqlAlchemyProfileRepository(self.db)

    @cached_property
    def signup_user_use_case(self) -> SignupUserUseCase:
        return SignupUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_service,
        )

    @cached_property
    def validate_token_use_case(self) -> ValidateTokenUseCase:
        return ValidateTokenUseCase(users=self.user_repository, tokens=self.token_service)

    @cached_property
    def get_profile_use_case(self) -> GetProfileUseCase:
        return GetProfileUseCase(profiles=self.profile_repository, tokens=self.token_service)

    @cached_property
    def update_profile_use_case(self) -> UpdateProfileUseCase:
        return UpdateProfileUseCase(profiles=self.profile_repository, tokens=self.token_service)

    @cached_property
    def subscribe_newsletter_use_case(self) -> SubscribeNewsletterUseCase:
        return SubscribeNewsletterUseCase(
            mailer=self.mailer,
            site_url=self.config.mail.site_url,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            signup_use_case=self.signup_user_use_case,
            login_use_case=self.login_user_use_case,
            validate_token_use_case=self.validate_token_use_case,
        )

    @cached_property
    def profile_controller(self) -> ProfileController:
        return ProfileController(
            get_profile_use_case=self.get_profile_use_case,
            update_profile_use_case=self.update_profile_use_case,
        )

    @cached_property
    def newsletter_controller(self) -> NewsletterController:
        return NewsletterController(subscribe_use_case=self.subscribe_newsletter_use_case)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(db=self.db)
