# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from html import escape

from formify_api.domain.users.repositories import Mailer
from formify_api.shared.errors import ValidationError, internal_errors
from formify_api.shared.logging import logger

WELCOME_SUBJECT = "Welcome to FormifyX!"

_WELCOME_HTML = """\
<div style="font-family: Arial, sans-serif; color: #333; max-width: 600px; margin: 0 auto; padding: 20px; border: 1px solid #ddd; border-radius: 10px;">
  <h1 style="color: #007BFF; text-align: center;">Welcome to FormifyX!</h1>
  <p style="font-size: 16px; line-height: 1.6;">
    Thank you for subscribing to FormifyX! You'll receive updates on early access and exclusive offers.
  </p>
  <p style="font-size: 16px; line-height: 1.6;">
    We're excited to have you on board. Stay tuned for the latest news, tips, and updates.
  </p>
  <div style="text-align: center; margin-top: 30px;">
    <a href="{site_url}" style="background-color: #007BFF; color: #fff; padding: 10px 20px; text-decoration: none; border-radius: 5px; font-size: 16px;">
      Visit Our Website
    </a>
  </div>
</div>
"""


def render_welcome_email(site_url: str) -> str:
    return _WELCOME_HTML.format(site_url=escape(site_url, quote=True))


class SubscribeNewsletterUseCase:
    def __init__(self, *, mailer: Mailer, site_url: str) -> None:
        self._mailer = mailer
        self._site_url = site_url

    def execute(self, email: str) -> None:
        email = (email or "").strip()
        if not email:
            raise ValidationError("Email is required")

        with internal_errors("newsletter.subscribe"):
            self._mailer.send(
                to=email,
                subject=WELCOME_SUBJECT,
                html=render_welcome_email(self._site_url),
            )
        logger.info(f"newsletter.subscribe: welcome mail sent to {email}")
