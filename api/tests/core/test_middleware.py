"""Unit tests for core.middleware module.

Tests ASGI middleware:
- SecurityHeadersMiddleware adds security headers to HTTP responses
- SecurityHeadersMiddleware skips non-HTTP scopes and relaxes CSP for docs
- RequestLoggingMiddleware echoes/creates a request id and timing header
"""

import pytest

from core.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware


async def _noop_receive():
    return {"type": "http.request", "body": b""}


async def _make_app_that_sends_response(scope, receive, send):
    """Simulate an ASGI app that sends a response."""
    await send({"type": "http.response.start", "status": 200, "headers": []})
    await send({"type": "http.response.body", "body": b"OK"})


async def _run(middleware, scope):
    sent_messages = []

    async def mock_send(message):
        sent_messages.append(message)

    await middleware(scope, _noop_receive, mock_send)
    return sent_messages


@pytest.mark.unit
class TestSecurityHeadersMiddleware:
    """Test SecurityHeadersMiddleware adds expected headers."""

    async def test_adds_security_headers(self):
        middleware = SecurityHeadersMiddleware(_make_app_that_sends_response)
        sent = await _run(middleware, {"type": "http", "path": "/api/Center"})

        header_names = {h[0] for h in sent[0]["headers"]}

        assert b"x-content-type-options" in header_names
        assert b"x-frame-options" in header_names
        assert b"content-security-policy" in header_names
        assert b"strict-transport-security" in header_names

    async def test_docs_path_has_no_csp(self):
        middleware = SecurityHeadersMiddleware(_make_app_that_sends_response)
        sent = await _run(middleware, {"type": "http", "path": "/docs"})

        header_names = {h[0] for h in sent[0]["headers"]}

        assert b"content-security-policy" not in header_names
        assert b"x-content-type-options" in header_names

    async def test_skips_non_http_scope(self):
        called = []

        async def inner(scope, receive, send):
            called.append(scope["type"])

        middleware = SecurityHeadersMiddleware(inner)
        await middleware({"type": "lifespan"}, _noop_receive, None)

        assert called == ["lifespan"]


@pytest.mark.unit
class TestRequestLoggingMiddleware:
    async def test_generates_request_id_and_duration(self):
        middleware = RequestLoggingMiddleware(_make_app_that_sends_response)
        sent = await _run(
            middleware,
            {"type": "http", "method": "GET", "path": "/health", "headers": []},
        )

        headers = dict(sent[0]["headers"])
        assert len(headers[b"x-request-id"]) == 32
        assert float(headers[b"x-request-duration-ms"].decode()) >= 0

    async def test_reuses_incoming_request_id(self):
        middleware = RequestLoggingMiddleware(_make_app_that_sends_response)
        sent = await _run(
            middleware,
            {
                "type": "http",
                "method": "GET",
                "path": "/health",
                "headers": [(b"x-request-id", b"req-42")],
            },
        )

        headers = dict(sent[0]["headers"])
        assert headers[b"x-request-id"] == b"req-42"

    async def test_truncates_oversized_request_id(self):
        middleware = RequestLoggingMiddleware(_make_app_that_sends_response)
        sent = await _run(
            middleware,
            {
                "type": "http",
                "method": "GET",
                "path": "/health",
                "headers": [(b"x-request-id", b"x" * 200)],
            },
        )

        headers = dict(sent[0]["headers"])
        assert len(headers[b"x-request-id"]) == 64
