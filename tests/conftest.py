import httpx
import pytest

from auth0_client import AuthenticationApiClient, ManagementApiClient
from auth0_client.config.settings import reset_settings

TENANT_URL = "https://tenant.auth0.com"
MANAGEMENT_URL = "https://tenant.auth0.com/api/v2"
MANAGEMENT_TOKEN = "mgmt-token"


class RecordingTransport:
    """Serves queued responses and keeps every request it received."""

    def __init__(self):
        self.requests = []
        self._responses = []

    def queue(self, status_code=200, **kwargs):
        self._responses.append(httpx.Response(status_code, **kwargs))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        return self._responses.pop(0)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for name in ("DOMAIN", "CLIENT_ID", "MANAGEMENT_API_TOKEN", "API_KEY"):
        monkeypatch.delenv(f"AUTH0_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def auth_client(transport):
    return AuthenticationApiClient(TENANT_URL, http_client=transport.http_client())


@pytest.fixture
def mgmt_client(transport):
    return ManagementApiClient(MANAGEMENT_TOKEN, MANAGEMENT_URL, http_client=transport.http_client())
