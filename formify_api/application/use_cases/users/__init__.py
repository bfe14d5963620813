# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .login_user import LoginResult, LoginUserUseCase
from .profile import GetProfileUseCase, UpdateProfileUseCase
from .signup_user import SignupUserUseCase
from .subscribe_newsletter import SubscribeNewsletterUseCase
from .validate_token import ValidateTokenUseCase

__all__ = [
    "GetProfileUseCase",
    "LoginResult",
    "LoginUserUseCase",
    "SignupUserUseCase",
    "SubscribeNewsletterUseCase",
    "UpdateProfileUseCase",
    "ValidateTokenUseCase",
]
