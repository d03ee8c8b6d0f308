from __future__ import annotations

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from pocketmon.collectors.base import BaseCollector
from pocketmon.errors import MalformedResponse, NodeQueryFailed
from pocketmon.models.node import (
    BalanceResponse,
    NodeMetrics,
    NodeQueryResponse,
    StatusResponse,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_version_adapter: TypeAdapter[str] = TypeAdapter(str)


class NodeCollector(BaseCollector[NodeMetrics]):
    """Queries the local node RPC and normalizes it into :class:`NodeMetrics`.

    Four sequential calls, each depending on the previous one:

    1. ``GET  {node_api}/v1``               -> app version (JSON string)
    2. ``GET  {rpc}/status``                -> identity and sync info
    3. ``POST {node_api}/v1/query/node``    -> public key, jailed, service url
    4. ``POST {node_api}/v1/query/balance`` -> balance

    Any failure aborts the read. Nothing is retried within a cycle.
    """

    name = "node_collector"

    def __init__(
        self,
        client: httpx.AsyncClient,
        node_api_url: str = "http://localhost:8082",
        rpc_url: str = "http://localhost:26657",
        chain: str = "pocket",
    ) -> None:
        self._client = client
        self.node_api_url = node_api_url.rstrip("/")
        self.rpc_url = rpc_url.rstrip("/")
        self.chain = chain

    async def read(self) -> NodeMetrics:
        app_version = await self.query_version()

        status = await self.query_status()
        node_info = status.result.node_info
        sync_info = status.result.sync_info
        address = node_info.id

        node = await self.query_node(address)
        balance = await self.query_balance(address)

        try:
            return NodeMetrics(
                chain=self.chain,
                app_version=app_version,
                moniker=node_info.moniker,
                height=int(sync_info.latest_block_height, 10),
                latest_block_time=sync_info.latest_block_time,
                catching_up=sync_info.catching_up,
                balance=balance.balance,
                jailed=node.jailed,
                service_url=node.service_url,
                address=address,
                public_key=node.public_key,
            )
        except (ValidationError, ValueError) as exc:
            raise MalformedResponse(self.node_api_url, f"invalid node state: {exc}") from exc

    # ── individual queries ──────────────────────────────

    async def query_version(self) -> str:
        url = f"{self.node_api_url}/v1"
        response = await self._request("GET", url)
        try:
            return _version_adapter.validate_json(response.content, strict=True)
        except ValidationError as exc:
            raise MalformedResponse(url, "expected a JSON string version") from exc

    async def query_status(self) -> StatusResponse:
        url = f"{self.rpc_url}/status"
        response = await self._request("GET", url)
        return self._decode(url, response, StatusResponse)

    async def query_node(self, address: str) -> NodeQueryResponse:
        url = f"{self.node_api_url}/v1/query/node"
        response = await self._request("POST", url, json={"address": address})
        return self._decode(url, response, NodeQueryResponse)

    async def query_balance(self, address: str) -> BalanceResponse:
        url = f"{self.node_api_url}/v1/query/balance"
        response = await self._request("POST", url, json={"address": address})
        return self._decode(url, response, BalanceResponse)

    # ── internals ───────────────────────────────────────

    async def _request(self, method: str, url: str, json: dict | None = None) -> httpx.Response:
        try:
            response = await self._client.request(method, url, json=json)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise NodeQueryFailed(url, str(exc) or type(exc).__name__) from exc
        return response

    @staticmethod
    def _decode(url: str, response: httpx.Response, model: type[M]) -> M:
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            logger.debug("Unexpected payload from %s: %s", url, response.text)
            raise MalformedResponse(url, f"{exc.error_count()} invalid field(s): {exc}") from exc
