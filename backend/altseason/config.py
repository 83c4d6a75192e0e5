from __future__ import annotations
from dataclasses import dataclass
import os
from typing import Mapping
from dotenv import load_dotenv

COINGECKO_BASE = "https://api.coingecko.com/api/v3"

def _optional(env: Mapping[str, str], key: str) -> str | None:
    # Empty strings count as unset, same as the Node `||` fallbacks did.
    value = env.get(key, "").strip()
    return value or None

# Now, we define the Settings class.
# We use @dataclass(frozen=True) to make this immutable.
# Once settings are loaded, they should not change during runtime.
@dataclass(frozen=True)
class Settings:
    port: int = 5000
    host: str = "0.0.0.0"
    frontend_url: str = "*"
    log_level: str = "INFO"

    # Email alerts (SendGrid)
    sendgrid_api_key: str | None = None
    alert_email_to: str | None = None
    alert_email_from: str | None = None

    # Upstream market data
    coingecko_base_url: str = COINGECKO_BASE
    upstream_timeout_seconds: float | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from the process environment.

        Args:
            env: Mapping to read from. Defaults to os.environ after loading `.env`.
        """
        if env is None:
            load_dotenv()
            env = os.environ

        timeout = _optional(env, "UPSTREAM_TIMEOUT_SECONDS")
        return cls(
            port=int(_optional(env, "PORT") or "5000"),
            host=_optional(env, "HOST") or "0.0.0.0",
            frontend_url=_optional(env, "FRONTEND_URL") or "*",
            log_level=(_optional(env, "LOG_LEVEL") or "INFO").upper(),
            sendgrid_api_key=_optional(env, "SENDGRID_API_KEY"),
            alert_email_to=_optional(env, "ALERT_EMAIL_TO"),
            alert_email_from=_optional(env, "ALERT_EMAIL_FROM"),
            coingecko_base_url=(_optional(env, "COINGECKO_BASE_URL") or COINGECKO_BASE).rstrip("/"),
            upstream_timeout_seconds=float(timeout) if timeout else None,
        )
