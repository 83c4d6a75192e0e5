"""
Email alert notifier backed by the SendGrid v3 HTTP API.

Alerts are a side channel: a failed send is logged and dropped, it never
fails the request that triggered it.
"""
from __future__ import annotations

import logging

import httpx

from altseason.config import Settings

log = logging.getLogger("services.notifier")

SENDGRID_SEND_URL = "https://api.sendgrid.com/v3/mail/send"


class NotificationError(Exception):
    pass


class AlertNotifier:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        """
        Initialize the AlertNotifier.

        Args:
            settings (Settings): Source of the API key and the sender/recipient addresses.
            transport: Optional httpx transport, used by tests to fake SendGrid.
        """
        self.api_key = settings.sendgrid_api_key
        self.to_addr = settings.alert_email_to
        self.from_addr = settings.alert_email_from
        self.transport = transport

        # Now, we check for the API key.
        # If it's missing, we log a warning but do NOT crash. Alerts just won't go out.
        if not self.api_key:
            log.warning("SENDGRID_API_KEY not set, email alerts disabled")

    def enabled(self) -> bool:
        return bool(self.api_key and self.to_addr and self.from_addr)

    def _message(self, subject: str, text: str) -> dict:
        return {
            "personalizations": [{"to": [{"email": self.to_addr}]}],
            "from": {"email": self.from_addr},
            "subject": subject,
            "content": [{"type": "text/plain", "value": text}],
        }

    async def _send(self, subject: str, text: str) -> None:
        if not self.api_key:
            raise NotificationError("SendGrid API key not configured")

        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            async with httpx.AsyncClient(timeout=15, transport=self.transport) as client:
                resp = await client.post(SENDGRID_SEND_URL, json=self._message(subject, text), headers=headers)
        except httpx.TransportError as e:
            raise NotificationError(f"SendGrid unreachable: {e}") from e
        except httpx.HTTPError as e:
            # Redirect loops, undecodable bodies and the like.
            raise NotificationError(f"SendGrid request failed: {e}") from e

        if not resp.is_success:
            raise NotificationError(f"SendGrid returned HTTP {resp.status_code}: {resp.text}")

    async def send_alert(self, subject: str, text: str) -> None:
        """
        Email an alert if sender and recipient are configured.

        Never raises: without addresses this is a no-op, and send failures are only logged.
        """
        if not self.to_addr or not self.from_addr:
            return
        try:
            await self._send(subject, text)
            log.info("Alert email sent: %s", subject)
        except NotificationError as e:
            log.error("Error sending email: %s", e)
        except Exception as e:
            log.exception("Unexpected error sending email: %s", e)
