from __future__ import annotations

import logging

import httpx
from pydantic_core import PydanticSerializationError

from pocketmon.errors import DeliveryFailed, Rejected, SerializationFailed
from pocketmon.models.report import Report

logger = logging.getLogger(__name__)


class Reporter:
    """Delivers reports to ``<endpoint>/<node_id>`` authenticated by API key.

    Delivery is best-effort: a rejection or transport failure is raised to
    the caller and never retried here.
    """

    def __init__(self, client: httpx.AsyncClient, endpoint: str = "https://injest.lunar.dev") -> None:
        self._client = client
        self.endpoint = endpoint.rstrip("/")

    def url_for(self, node_id: str) -> str:
        return f"{self.endpoint}/{node_id}"

    async def send(self, report: Report, node_id: str, api_key: str) -> int:
        """POST *report* and return the collector's status code."""
        try:
            body = report.to_json()
        except (PydanticSerializationError, ValueError) as exc:
            raise SerializationFailed(f"cannot serialize report: {exc}") from exc

        url = self.url_for(node_id)
        try:
            response = await self._client.post(
                url,
                content=body,
                headers={"x-api-key": api_key, "Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise DeliveryFailed(f"{url}: {str(exc) or type(exc).__name__}") from exc

        if response.status_code >= 400:
            raise Rejected(response.status_code, response.text)

        logger.info("Report delivered to %s (%d)", url, response.status_code)
        return response.status_code
