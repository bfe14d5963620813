# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from formify_api.shared.logging import logger

from .base import AppError, InternalError


@contextmanager
def internal_errors(operation: str, message: str = "Something went wrong") -> Iterator[None]:
    """Let application errors through, turn anything else into ``InternalError``.

    The original exception is logged here and chained, but never rendered.
    """
    try:
        yield
    except AppError:
        raise
    except Exception as exc:
        logger.exception(f"{operation}: unexpected failure")
        raise InternalError(message) from exc


__all__ = ["internal_errors"]
