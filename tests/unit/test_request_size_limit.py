"""Unit tests for RequestSizeLimitMiddleware on a minimal app."""

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from pastebox.middleware import RequestSizeLimitMiddleware


def _echo_app(max_bytes: int) -> FastAPI:
    app = FastAPI()

    @app.post("/echo")
    async def echo(request: Request) -> dict:
        return {"size": len(await request.body())}

    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=max_bytes)
    return app


@pytest.fixture
async def client() -> AsyncClient:
    transport = ASGITransport(app=_echo_app(max_bytes=100))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_body_within_limit_passes(client: AsyncClient) -> None:
    response = await client.post("/echo", content=b"x" * 100)
    assert response.status_code == 200
    assert response.json() == {"size": 100}


async def test_declared_length_over_limit_rejected(client: AsyncClient) -> None:
    response = await client.post("/echo", content=b"x" * 101)
    assert response.status_code == 413
    body = response.json()
    assert body["error"] == "PAYLOAD_TOO_LARGE"
    assert body["details"] == {"max_bytes": 100, "content_length": 101}


async def test_streamed_body_over_limit_rejected(client: AsyncClient) -> None:
    async def chunks():
        for _ in range(5):
            yield b"x" * 40

    response = await client.post("/echo", content=chunks())
    assert response.status_code == 413


async def test_streamed_body_within_limit_passes(client: AsyncClient) -> None:
    async def chunks():
        yield b"x" * 30
        yield b"x" * 30

    response = await client.post("/echo", content=chunks())
    assert response.status_code == 200
    assert response.json() == {"size": 60}
