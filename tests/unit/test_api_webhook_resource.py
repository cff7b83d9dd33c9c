"""Unit tests for the webhook ingestion resource."""

from __future__ import annotations

import copy
import typing as typ

import falcon
import falcon.testing
import pytest

from giteahook.api.app import AppDependencies, create_app
from giteahook.events import EventType, Repository
from tests.helpers.webhook_requests import (
    PULL_REQUEST_PAYLOAD,
    SAMPLE_BODY,
    SAMPLE_SIGNATURE,
    WEBHOOK_SECRET,
    DispatchRecorder,
    json_body,
    signed_headers,
)

if typ.TYPE_CHECKING:
    from falcon.asgi import Request, Response

    from giteahook.events import Event


@pytest.fixture
def recorder() -> DispatchRecorder:
    """Collect dispatched events."""
    return DispatchRecorder()


@pytest.fixture
def client(recorder: DispatchRecorder) -> falcon.testing.TestClient:
    """Build a test client with the webhook mounted on /webhook."""
    app = create_app(AppDependencies(secret=WEBHOOK_SECRET, on_success=recorder))
    return falcon.testing.TestClient(app)


class _FakeLogger:
    """Collects log calls for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str:
        self.calls.append((level, message))
        return message


class TestValidationChain:
    """Each failed check ends the request with HTTP 400."""

    @pytest.mark.parametrize(
        "method",
        [
            "GET",
            "HEAD",
            "OPTIONS",
            "PUT",
            "PATCH",
            "DELETE",
            "TRACE",
            "CONNECT",
            "PROPFIND",
            "BREW",
        ],
    )
    def test_non_post_methods_rejected_with_empty_body(
        self,
        client: falcon.testing.TestClient,
        recorder: DispatchRecorder,
        method: str,
    ) -> None:
        """Any method other than POST is a 400 with no body."""
        result = client.simulate_request(
            method,
            "/webhook",
            headers={
                "Content-Type": "application/json",
                "X-Gitea-Event": "push",
                "X-Gitea-Signature": SAMPLE_SIGNATURE,
            },
            body=SAMPLE_BODY,
        )
        assert result.status == falcon.HTTP_400
        assert result.text == ""
        assert recorder.calls == []

    @pytest.mark.parametrize(
        ("headers", "body", "expected_text"),
        [
            pytest.param({}, b"", "Invalid content type", id="no-content-type"),
            pytest.param(
                {"Content-Type": "text/plain"},
                SAMPLE_BODY,
                "Invalid content type",
                id="wrong-content-type",
            ),
            pytest.param(
                {"Content-Type": "application/json; charset=utf-8"},
                SAMPLE_BODY,
                "Invalid content type",
                id="content-type-with-parameters",
            ),
            pytest.param(
                {"Content-Type": "application/json"},
                SAMPLE_BODY,
                "No event header specified",
                id="no-event-header",
            ),
            pytest.param(
                {"Content-Type": "application/json", "X-Gitea-Event": "issues"},
                SAMPLE_BODY,
                "Unsupported event type issues",
                id="unsupported-event",
            ),
            pytest.param(
                {"Content-Type": "application/json", "X-Gitea-Event": "push"},
                SAMPLE_BODY,
                "No signature header specified",
                id="no-signature",
            ),
            pytest.param(
                {
                    "Content-Type": "application/json",
                    "X-Gitea-Event": "push",
                    "X-Gitea-Signature": "blah",
                },
                SAMPLE_BODY,
                "Could not validate signature of body",
                id="invalid-signature",
            ),
        ],
    )
    def test_rejections(
        self,
        client: falcon.testing.TestClient,
        recorder: DispatchRecorder,
        headers: dict[str, str],
        body: bytes,
        expected_text: str,
    ) -> None:
        """Header and signature failures produce a diagnostic body."""
        result = client.simulate_post("/webhook", headers=headers, body=body)
        assert result.status == falcon.HTTP_400
        assert result.text == expected_text
        assert recorder.calls == []

    def test_event_check_precedes_signature_check(
        self, client: falcon.testing.TestClient
    ) -> None:
        """An unsupported event is reported even when unsigned."""
        result = client.simulate_post(
            "/webhook",
            headers={"Content-Type": "application/json", "X-Gitea-Event": "release"},
            body=SAMPLE_BODY,
        )
        assert result.text == "Unsupported event type release"

    def test_signed_garbage_fails_decoding(
        self, client: falcon.testing.TestClient, recorder: DispatchRecorder
    ) -> None:
        """A correctly signed but malformed body is a decode failure."""
        body = b'{"number": "twenty-three"}'
        result = client.simulate_post(
            "/webhook", headers=signed_headers(body), body=body
        )
        assert result.status == falcon.HTTP_400
        assert result.text.startswith("Could not decode body: ")
        assert recorder.calls == []

    def test_unsigned_garbage_fails_signature_first(
        self, client: falcon.testing.TestClient
    ) -> None:
        """Malformed JSON with a bad signature never reaches the decoder."""
        headers = signed_headers(SAMPLE_BODY)
        result = client.simulate_post("/webhook", headers=headers, body=b"{oops")
        assert result.text == "Could not validate signature of body"

    def test_signature_over_reencoded_body_is_rejected(
        self, client: falcon.testing.TestClient
    ) -> None:
        """The digest must cover the bytes exactly as sent."""
        headers = signed_headers(b'{"secret":"123456","number":23}')
        result = client.simulate_post("/webhook", headers=headers, body=SAMPLE_BODY)
        assert result.status == falcon.HTTP_400

    def test_rejections_are_logged(
        self,
        client: falcon.testing.TestClient,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """Rejections are logged at WARNING without the signature."""
        import giteahook.api.errors as errors_module

        fake = _FakeLogger()
        monkeypatch.setattr(errors_module, "logger", fake)
        client.simulate_post(
            "/webhook",
            headers={
                "Content-Type": "application/json",
                "X-Gitea-Event": "push",
                "X-Gitea-Signature": "deadbeef",
            },
            body=SAMPLE_BODY,
        )
        assert fake.calls == [
            (
                "WARNING",
                "Rejected webhook POST /webhook: Could not validate signature of body",
            )
        ]


class TestDispatch:
    """Fully valid deliveries reach the callback."""

    def test_valid_push_returns_default_200(
        self, client: falcon.testing.TestClient, recorder: DispatchRecorder
    ) -> None:
        """The reference delivery is accepted and dispatched."""
        result = client.simulate_post(
            "/webhook",
            headers={
                "Content-Type": "application/json",
                "X-Gitea-Event": "push",
                "X-Gitea-Signature": SAMPLE_SIGNATURE,
            },
            body=SAMPLE_BODY,
        )
        assert result.status == falcon.HTTP_200
        assert len(recorder.calls) == 1
        call = recorder.calls[0]
        assert call.event_type is EventType.PUSH
        assert call.event.number == 23
        assert call.event.secret == "123456"

    def test_content_type_is_case_insensitive(
        self, client: falcon.testing.TestClient, recorder: DispatchRecorder
    ) -> None:
        """``Application/JSON`` is accepted."""
        headers = signed_headers(SAMPLE_BODY, content_type="Application/JSON")
        result = client.simulate_post("/webhook", headers=headers, body=SAMPLE_BODY)
        assert result.status == falcon.HTTP_200
        assert len(recorder.calls) == 1

    def test_pull_request_delivery(
        self, client: falcon.testing.TestClient, recorder: DispatchRecorder
    ) -> None:
        """pull_request deliveries dispatch with the pull-request kind."""
        body = json_body(PULL_REQUEST_PAYLOAD)
        headers = signed_headers(body, event="pull_request")
        result = client.simulate_post("/webhook", headers=headers, body=body)
        assert result.status == falcon.HTTP_200
        call = recorder.calls[0]
        assert call.event_type is EventType.PULL_REQUEST
        assert call.event.pull_request.head.ref == "kelp"

    def test_pull_request_with_deleted_head_fork(
        self, client: falcon.testing.TestClient, recorder: DispatchRecorder
    ) -> None:
        """A ``null`` head repository still dispatches with an empty record."""
        payload = copy.deepcopy(PULL_REQUEST_PAYLOAD)
        payload["pull_request"]["head"]["repo"] = None
        body = json_body(payload)
        headers = signed_headers(body, event="pull_request")
        result = client.simulate_post("/webhook", headers=headers, body=body)
        assert result.status == falcon.HTTP_200
        head = recorder.calls[0].event.pull_request.head
        assert head.ref == "kelp"
        assert head.repo == Repository()

    def test_sync_callback_owns_response(self) -> None:
        """A plain function callback can write its own response."""

        def on_success(
            event_type: EventType, event: Event, resp: Response, req: Request
        ) -> None:
            resp.status = falcon.HTTP_202
            resp.media = {"kind": event_type.display_name, "path": req.path}

        app = create_app(AppDependencies(secret=WEBHOOK_SECRET, on_success=on_success))
        result = falcon.testing.TestClient(app).simulate_post(
            "/webhook", headers=signed_headers(SAMPLE_BODY), body=SAMPLE_BODY
        )
        assert result.status == falcon.HTTP_202
        assert result.json == {"kind": "push", "path": "/webhook"}

    def test_each_request_is_independent(
        self, client: falcon.testing.TestClient, recorder: DispatchRecorder
    ) -> None:
        """A rejected request does not affect the next valid one."""
        client.simulate_post("/webhook", headers={}, body=b"")
        result = client.simulate_post(
            "/webhook", headers=signed_headers(SAMPLE_BODY), body=SAMPLE_BODY
        )
        assert result.status == falcon.HTTP_200
        assert len(recorder.calls) == 1
