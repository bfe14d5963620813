# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Outbound mail over SMTP with bounded retries."""

from __future__ import annotations

import smtplib
from email.message import EmailMessage

from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from formify_api.domain.users.exceptions import MailDeliveryError
from formify_api.domain.users.repositories import Mailer
from formify_api.shared.config import MailConfig
from formify_api.shared.logging import logger

# Connection drops and 4xx replies are worth another attempt; 5xx replies are not.
_TRANSIENT = (smtplib.SMTPServerDisconnected, smtplib.SMTPConnectError, ConnectionError, TimeoutError)


def _is_temporary_reply(exc: BaseException) -> bool:
    return isinstance(exc, smtplib.SMTPResponseException) and 400 <= exc.smtp_code < 500


class SmtpMailer(Mailer):
    def __init__(self, config: MailConfig) -> None:
        self._config = config

    def _build_message(self, *, to: str, subject: str, html: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self._config.user
        message["To"] = to
        message["Subject"] = subject
        message.set_content("Thank you for subscribing to FormifyX!")
        message.add_alternative(html, subtype="html")
        return message

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(
            host=self._config.host,
            port=self._config.port,
            timeout=self._config.timeout,
        ) as conn:
            if self._config.use_tls:
                conn.starttls()
            if self._config.user:
                conn.login(self._config.user, self._config.password)
            conn.send_message(message)

    def send(self, *, to: str, subject: str, html: str) -> None:
        message = self._build_message(to=to, subject=subject, html=html)
        retry = Retrying(
            stop=stop_after_attempt(self._config.retries + 1),
            wait=wait_exponential(multiplier=self._config.backoff_base, max=8.0),
            retry=retry_if_exception_type(_TRANSIENT) | retry_if_exception(_is_temporary_reply),
            reraise=False,
        )
        try:
            for attempt in retry:
                with attempt:
                    logger.debug(
                        f"mail: attempt={attempt.retry_state.attempt_number} host={self._config.host}"
                    )
                    self._deliver(message)
        except RetryError as exc:
            logger.error(f"mail: giving up after {exc.last_attempt.attempt_number} attempts")
            raise MailDeliveryError() from exc.last_attempt.exception()
        except (smtplib.SMTPException, OSError) as exc:
            logger.error(f"mail: delivery failed: {type(exc).__name__}")
            raise MailDeliveryError() from exc

        logger.info(f"mail: sent '{subject}' to {to}")


__all__ = ["SmtpMailer"]
