"""Pytest configuration and shared fixtures."""

import json
import os
from collections.abc import AsyncGenerator, Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from bybitapi.client.rest import ClientConfig, RestClient
from bybitapi.utils.config import Config

TEST_KEY = "test-key"
TEST_SECRET = "test-secret"


@dataclass
class CapturedRequest:
    """What the mock exchange received."""

    method: str
    path: str
    query_string: str
    headers: dict[str, str]
    body: bytes


@dataclass
class MockExchange:
    """A running mock server plus the requests it has seen."""

    url: str
    requests: list[CapturedRequest] = field(default_factory=list)


MockServerFactory = Callable[..., Awaitable[MockExchange]]


@pytest.fixture
async def mock_server() -> AsyncGenerator[MockServerFactory, None]:
    """Start mock exchange servers answering one route with a canned response."""
    servers: list[TestServer] = []

    async def factory(
        path: str,
        method: str,
        status: int,
        body: Any,
        headers: dict[str, str] | None = None,
    ) -> MockExchange:
        raw = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
        app = web.Application()
        server = TestServer(app)

        exchange = MockExchange(url="")

        async def handler(request: web.Request) -> web.Response:
            exchange.requests.append(
                CapturedRequest(
                    method=request.method,
                    path=request.path,
                    query_string=request.query_string,
                    headers=dict(request.headers),
                    body=await request.read(),
                )
            )
            return web.Response(
                status=status,
                body=raw,
                headers=headers,
                content_type="application/json",
            )

        app.router.add_route(method, path, handler)
        await server.start_server()
        servers.append(server)

        exchange.url = f"http://{server.host}:{server.port}"
        return exchange

    yield factory

    for server in servers:
        await server.close()


@pytest.fixture
async def session() -> AsyncGenerator[aiohttp.ClientSession, None]:
    """A caller-managed session."""
    async with aiohttp.ClientSession() as s:
        yield s


@pytest.fixture
def make_client(session: aiohttp.ClientSession) -> Callable[..., RestClient]:
    """Build a RestClient for a mock exchange, authenticated unless told otherwise."""

    def factory(base_url: str, auth: bool = True) -> RestClient:
        client = RestClient(ClientConfig(base_url=base_url), session=session)
        if auth:
            client.with_auth(TEST_KEY, TEST_SECRET)
        return client

    return factory


@pytest.fixture
def skip_if_no_credentials():
    """Skip test if testnet API credentials are not available."""
    if not os.environ.get(Config.TEST_KEY_ENV) or not os.environ.get(Config.TEST_SECRET_ENV):
        pytest.skip("API credentials not available")


@pytest.fixture
def v5_ok_body() -> dict:
    """v5 create order success envelope."""
    return {
        "retCode": 0,
        "retMsg": "OK",
        "result": {"orderId": "1321003749386327552", "orderLinkId": "spot-test-postonly"},
        "retExtInfo": {},
        "time": 1672211918471,
    }


@pytest.fixture
def spot_order_body() -> dict:
    """Spot v1 order success envelope."""
    return {
        "ret_code": 0,
        "ret_msg": "",
        "ext_code": None,
        "ext_info": None,
        "result": {
            "orderId": "1037799004578056704",
            "orderLinkId": "1638451282020267",
            "symbol": "BTCUSDT",
            "transactTime": "1638451282090",
            "price": "28383.5",
            "origQty": "1.100000",
            "type": "MARKET",
            "side": "Buy",
            "status": "NEW",
            "timeInForce": "GTC",
            "accountId": "213998",
            "symbolName": "BTCUSDT",
            "executedQty": "0",
        },
    }


# Pytest configuration
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "live: mark test as requiring live connection")
    config.addinivalue_line(
        "markers", "credentials: mark test as requiring API credentials"
    )
