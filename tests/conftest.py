"""Shared fakes for the local node RPC and the remote collector."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

NODE_API = "http://localhost:8082"
RPC = "http://localhost:26657"
COLLECTOR = "https://collector.test"

GiB = 1024**3


def status_payload(**sync_overrides: Any) -> dict:
    sync_info = {
        "latest_block_height": "1000000",
        "latest_block_time": "2026-10-18T12:00:00.123456Z",
        "catching_up": False,
    }
    sync_info.update(sync_overrides)
    return {
        "jsonrpc": "2.0",
        "id": -1,
        "result": {
            "node_info": {"id": "a1b2c3d4", "moniker": "alice", "network": "mainnet"},
            "sync_info": sync_info,
        },
    }


NODE_PAYLOAD = {
    "public_key": "f00dbabe",
    "jailed": False,
    "service_url": "https://alice.example:443",
    "chains": ["0001", "0021"],
}

BALANCE_PAYLOAD = {"balance": 42.5}


class FakeNetwork:
    """Routes requests to canned node RPC answers and records collector posts."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {
            ("GET", f"{NODE_API}/v1"): lambda r: httpx.Response(200, json="RC-0.11.1"),
            ("GET", f"{RPC}/status"): lambda r: httpx.Response(200, json=status_payload()),
            ("POST", f"{NODE_API}/v1/query/node"): lambda r: httpx.Response(200, json=NODE_PAYLOAD),
            ("POST", f"{NODE_API}/v1/query/balance"): lambda r: httpx.Response(200, json=BALANCE_PAYLOAD),
        }
        self.collector_status = 200
        self.requests: list[httpx.Request] = []

    @property
    def collector_posts(self) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url).startswith(COLLECTOR)]

    @property
    def node_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if not str(r.url).startswith(COLLECTOR)]

    def set(self, method: str, url: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[(method, url)] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url.startswith(COLLECTOR):
            return httpx.Response(self.collector_status, text="ok" if self.collector_status < 400 else "boom")
        route = self.routes.get((request.method, url))
        if route is None:
            return httpx.Response(404, text="not found")
        return route(request)


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content)


@pytest.fixture
def network() -> FakeNetwork:
    return FakeNetwork()


@pytest.fixture
async def client(network):
    async with httpx.AsyncClient(transport=httpx.MockTransport(network.handler)) as c:
        yield c
