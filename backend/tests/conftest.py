import httpx
import pytest
from fastapi.testclient import TestClient

from altseason.config import Settings
from altseason.main import create_app
from altseason.services.coingecko import CoinGeckoClient
from altseason.services.notifier import AlertNotifier

BASE = "https://coingecko.test/api/v3"


def global_payload(btc):
    return {"data": {"market_cap_percentage": {"btc": btc, "eth": 12.3}, "active_cryptocurrencies": 10000}}


class FakeUpstream:
    """Routes requests by path and records every call."""

    def __init__(self):
        self.routes = {}
        self.calls = []

    def set(self, path, status=200, json=None):
        self.routes[path] = (status, json)

    def handler(self, request):
        self.calls.append(request)
        path = request.url.path.replace("/api/v3", "", 1)
        if path not in self.routes:
            return httpx.Response(404)
        status, body = self.routes[path]
        return httpx.Response(status, json=body)

    def transport(self):
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def email_calls():
    return []


@pytest.fixture
def settings():
    return Settings(
        sendgrid_api_key="SG.test",
        alert_email_to="trader@example.com",
        alert_email_from="alerts@example.com",
        coingecko_base_url=BASE,
        frontend_url="https://app.example.com",
    )


@pytest.fixture
def client(settings, upstream, email_calls):
    def sendgrid(request):
        email_calls.append(request)
        return httpx.Response(202)

    app = create_app(
        settings,
        market_client=CoinGeckoClient(BASE, transport=upstream.transport()),
        notifier=AlertNotifier(settings, transport=httpx.MockTransport(sendgrid)),
    )
    return TestClient(app)
