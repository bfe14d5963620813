# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users import Profile, SessionClaims, UserAccount

__all__ = ["Profile", "SessionClaims", "UserAccount"]
