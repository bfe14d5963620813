# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from formify_api.shared.errors.base import DomainError


class DuplicateEmailError(DomainError):
    code = "user_already_exists"
    message = "User already exists"


class InvalidCredentialsError(DomainError):
    # Shared by "no such user" and "wrong password".
    code = "invalid_credentials"
    message = "Email or password is incorrect"


class MissingTokenError(DomainError):
    code = "missing_token"
    status = HTTPStatus.UNAUTHORIZED
    message = "No token provided"


class InvalidTokenError(DomainError):
    # Shared by malformed, tampered, expired and wrong-key tokens.
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED
    message = "Invalid token"


class UserNotFoundError(DomainError):
    code = "user_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "User not found"


class ProfileNotFoundError(DomainError):
    code = "profile_not_found"
    status = HTTPStatus.NOT_FOUND
    message = "Profile not found"


class MailDeliveryError(DomainError):
    code = "mail_delivery_failed"
    status = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "Failed to send email"
