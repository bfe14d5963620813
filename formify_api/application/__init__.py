# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.users import (
    GetProfileUseCase,
    LoginResult,
    LoginUserUseCase,
    SignupUserUseCase,
    SubscribeNewsletterUseCase,
    UpdateProfileUseCase,
    ValidateTokenUseCase,
)

__all__ = [
    "GetProfileUseCase",
    "LoginResult",
    "LoginUserUseCase",
    "SignupUserUseCase",
    "SubscribeNewsletterUseCase",
    "UpdateProfileUseCase",
    "ValidateTokenUseCase",
]
