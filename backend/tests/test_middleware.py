"""Tests for the body limit and admin failure tracking middleware."""

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.responses import PlainTextResponse

from sensitive.middleware.auth_guard import AuthFailureTracker
from sensitive.middleware.body_limit import BodyLimitMiddleware


async def body_length_app(scope, receive, send):
    body = b""
    more_body = True
    while more_body:
        message = await receive()
        body += message.get("body", b"")
        more_body = message.get("more_body", False)
    await PlainTextResponse(str(len(body)))(scope, receive, send)


def limited_client(max_bytes: int = 10) -> AsyncClient:
    app = BodyLimitMiddleware(body_length_app, max_bytes=max_bytes)
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


async def chunks(*parts: bytes):
    for part in parts:
        yield part


@pytest.mark.asyncio
async def test_body_within_limit_reaches_app():
    async with limited_client() as c:
        response = await c.post("/", content=b"0123456789")

    assert response.status_code == 200
    assert response.text == "10"


@pytest.mark.asyncio
async def test_declared_oversize_body_is_rejected():
    async with limited_client() as c:
        response = await c.post("/", content=b"x" * 11)

    assert response.status_code == 413
    assert "10 bytes" in response.json()["detail"]


@pytest.mark.asyncio
async def test_chunked_bodies_are_buffered_and_counted():
    async with limited_client() as c:
        small = await c.post("/", content=chunks(b"abc", b"def"))
        large = await c.post("/", content=chunks(b"abcdef", b"ghijkl"))

    assert small.status_code == 200
    assert small.text == "6"
    assert large.status_code == 413


@pytest.mark.asyncio
async def test_get_requests_pass_through():
    async with limited_client(max_bytes=0) as c:
        response = await c.get("/")

    assert response.status_code == 200


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestAuthFailureTracker:
    def test_blocks_after_max_failures(self):
        tracker = AuthFailureTracker(max_failures=3, block_seconds=60, clock=FakeClock())

        for _ in range(2):
            tracker.observe("10.0.0.1", 401)
        assert tracker.is_blocked("10.0.0.1") is False

        tracker.observe("10.0.0.1", 401)
        assert tracker.is_blocked("10.0.0.1") is True
        assert tracker.is_blocked("10.0.0.2") is False

    def test_block_expires(self):
        clock = FakeClock()
        tracker = AuthFailureTracker(max_failures=1, block_seconds=60, clock=clock)
        tracker.observe("10.0.0.1", 401)

        clock.now += 61
        assert tracker.is_blocked("10.0.0.1") is False

        # The counter starts over after expiry.
        tracker.observe("10.0.0.1", 401)
        assert tracker.is_blocked("10.0.0.1") is True

    def test_success_forgives_failures(self):
        tracker = AuthFailureTracker(max_failures=2, clock=FakeClock())
        tracker.observe("10.0.0.1", 401)
        tracker.observe("10.0.0.1", 200)
        tracker.observe("10.0.0.1", 401)

        assert tracker.is_blocked("10.0.0.1") is False

    def test_other_errors_do_not_count(self):
        tracker = AuthFailureTracker(max_failures=1, clock=FakeClock())
        tracker.observe("10.0.0.1", 404)
        tracker.observe("10.0.0.1", 503)

        assert tracker.is_blocked("10.0.0.1") is False
