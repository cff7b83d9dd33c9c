"""Behavioural coverage for the giteahook runtime probes."""

from __future__ import annotations

import typing as typ

import falcon.testing
import pytest
from pytest_bdd import given, parsers, scenario, then, when

if typ.TYPE_CHECKING:
    from falcon.testing.client import Result


class RuntimeContext(typ.TypedDict, total=False):
    """Shared mutable scenario state."""

    client: falcon.testing.TestClient
    response: Result


@scenario(
    "../runtime.feature",
    "Health endpoint returns ok status",
)
def test_health_endpoint_returns_ok() -> None:
    """Wrap the pytest-bdd scenario for health endpoint."""


@scenario(
    "../runtime.feature",
    "Ready endpoint reports an unconfigured receiver",
)
def test_ready_endpoint_reports_unconfigured() -> None:
    """Wrap the pytest-bdd scenario for an unconfigured ready endpoint."""


@scenario(
    "../runtime.feature",
    "Ready endpoint returns ready status once a secret is set",
)
def test_ready_endpoint_returns_ready() -> None:
    """Wrap the pytest-bdd scenario for a configured ready endpoint."""


@pytest.fixture
def runtime_context() -> RuntimeContext:
    """Provide empty scenario state."""
    return {}


def _build_client(runtime_context: RuntimeContext) -> None:
    from giteahook.runtime import create_app

    runtime_context["client"] = falcon.testing.TestClient(create_app())


@given("a giteahook runtime app without a webhook secret")
def given_app_without_secret(runtime_context: RuntimeContext) -> None:
    """Build the runtime app with no secret configured."""
    _build_client(runtime_context)


@given(parsers.parse('a giteahook runtime app with webhook secret "{secret}"'))
def given_app_with_secret(
    runtime_context: RuntimeContext,
    monkeypatch: pytest.MonkeyPatch,
    secret: str,
) -> None:
    """Build the runtime app with the webhook route mounted."""
    monkeypatch.setenv("GITEAHOOK_WEBHOOK_SECRET", secret)
    _build_client(runtime_context)


@when(parsers.parse("I request GET {path}"))
def when_request_get(runtime_context: RuntimeContext, path: str) -> None:
    """Issue a GET request to the given path."""
    client = runtime_context["client"]
    runtime_context["response"] = client.simulate_get(path)


@then(parsers.parse("the response status is {status:d}"))
def then_response_status(runtime_context: RuntimeContext, status: int) -> None:
    """Assert the HTTP response status code."""
    response = runtime_context["response"]
    assert response.status_code == status, (
        f"expected status {status}, got {response.status_code}"
    )


@then(parsers.parse('the response body is {{"status": "{expected_status}"}}'))
def then_response_body_status(
    runtime_context: RuntimeContext, expected_status: str
) -> None:
    """Assert the response JSON body carries the expected status."""
    response = runtime_context["response"]
    assert response.json == {"status": expected_status}, (
        f"expected {{'status': '{expected_status}'}}, got {response.json}"
    )
