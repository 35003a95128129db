import logging

import httpx
import pytest
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from pydantic import ValidationError as PydanticValidationError

from auth0_client.config.settings import Settings, get_settings, reset_settings
from auth0_client.connection import ApiConnection
from auth0_client.utils.telemetry import setup_logging, setup_telemetry


def test_settings_read_prefixed_environment(monkeypatch):
    monkeypatch.setenv("AUTH0_DOMAIN", "tenant.auth0.com")
    monkeypatch.setenv("AUTH0_TIMEOUT_SECONDS", "2.5")

    settings = get_settings()

    assert settings.domain == "tenant.auth0.com"
    assert settings.timeout_seconds == 2.5
    assert settings.authentication_api_url == "https://tenant.auth0.com"
    assert settings.management_api_url == "https://tenant.auth0.com/api/v2"


def test_get_settings_is_cached_until_reset(monkeypatch):
    monkeypatch.setenv("AUTH0_DOMAIN", "one.auth0.com")
    first = get_settings()
    monkeypatch.setenv("AUTH0_DOMAIN", "two.auth0.com")

    assert get_settings() is first
    reset_settings()
    assert get_settings().domain == "two.auth0.com"


def test_timeout_must_be_positive():
    with pytest.raises(PydanticValidationError):
        Settings(_env_file=None, timeout_seconds=0)


def test_setup_logging_returns_package_logger():
    logger = setup_logging("DEBUG")

    assert logger.name == "auth0_client"
    assert isinstance(logger, logging.Logger)
    assert logging.getLogger("httpx").level == logging.WARNING


@pytest.mark.asyncio
async def test_requests_are_traced():
    exporter = InMemorySpanExporter()
    setup_telemetry("auth0-client-tests", exporter=exporter)
    connection = ApiConnection(
        "https://tenant.auth0.com/api/v2",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[]))),
    )

    await connection.request_json("GET", "/rules")

    spans = [span for span in exporter.get_finished_spans() if span.name == "auth0.request"]
    assert len(spans) == 1
    assert spans[0].attributes["http.method"] == "GET"
    assert spans[0].attributes["http.route"] == "/rules"
    assert spans[0].attributes["http.status_code"] == 200
