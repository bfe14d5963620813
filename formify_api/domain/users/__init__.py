# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Profile, SessionClaims, UserAccount
from .exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    InvalidTokenError,
    MailDeliveryError,
    MissingTokenError,
    ProfileNotFoundError,
    UserNotFoundError,
)

__all__ = [
    "DuplicateEmailError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "MailDeliveryError",
    "MissingTokenError",
    "Profile",
    "ProfileNotFoundError",
    "SessionClaims",
    "UserAccount",
    "UserNotFoundError",
]
