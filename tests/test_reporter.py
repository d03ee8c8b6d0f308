"""Tests for pocketmon.engine.reporter."""

from __future__ import annotations

import httpx
import pytest

from pocketmon.engine.reporter import Reporter
from pocketmon.errors import DeliveryFailed, Rejected
from pocketmon.models import HostMetrics, NodeMetrics, Report

from conftest import COLLECTOR, GiB, request_json


def _report() -> Report:
    return Report(
        timestamp="2026-10-18T12:00:00+00:00",
        host=HostMetrics(
            memory_total=16 * GiB,
            memory_free=4 * GiB,
            disk_total=100 * 10**9,
            disk_free=40 * 10**9,
            uptime=86400,
            platform="linux",
            cpu_usage_percent=12.5,
        ),
        node=NodeMetrics(
            app_version="RC-0.11.1",
            moniker="alice",
            height=1_000_000,
            latest_block_time="2026-10-18T11:59:00Z",
            catching_up=False,
            balance=42.5,
            jailed=False,
            service_url="https://alice.example:443",
            address="a1b2c3d4",
            public_key="f00dbabe",
        ),
    )


@pytest.fixture
def reporter(client):
    return Reporter(client, endpoint=COLLECTOR)


class TestReporter:
    def test_url_for_node(self, client):
        assert Reporter(client, endpoint=f"{COLLECTOR}/").url_for("node-1") == f"{COLLECTOR}/node-1"

    @pytest.mark.asyncio
    async def test_posts_report_with_api_key(self, reporter, network):
        status = await reporter.send(_report(), "node-1", "secret-key")

        assert status == 200
        assert len(network.collector_posts) == 1
        request = network.collector_posts[0]
        assert request.method == "POST"
        assert str(request.url) == f"{COLLECTOR}/node-1"
        assert request.headers["x-api-key"] == "secret-key"
        assert request.headers["content-type"] == "application/json"

    @pytest.mark.asyncio
    async def test_body_round_trips(self, reporter, network):
        report = _report()
        await reporter.send(report, "node-1", "k")

        body = network.collector_posts[0].content
        assert Report.from_json(body) == report
        data = request_json(network.collector_posts[0])
        assert data["version"] == "v1"
        assert data["host"]["CPUUsagePercent"] == 12.5
        assert data["node"]["height"] == 1_000_000

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", [400, 401, 403, 404, 500, 503])
    async def test_error_status_is_rejected(self, reporter, network, code):
        network.collector_status = code
        with pytest.raises(Rejected) as excinfo:
            await reporter.send(_report(), "node-1", "k")
        assert excinfo.value.status_code == code
        assert excinfo.value.body == "boom"
        assert len(network.collector_posts) == 1  # never retried

    @pytest.mark.asyncio
    async def test_3xx_is_not_rejected(self, reporter, network):
        network.collector_status = 304
        assert await reporter.send(_report(), "node-1", "k") == 304

    @pytest.mark.asyncio
    async def test_transport_failure_is_delivery_failed(self):
        def _refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("tls handshake failed", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(_refuse)) as client:
            reporter = Reporter(client, endpoint=COLLECTOR)
            with pytest.raises(DeliveryFailed) as excinfo:
                await reporter.send(_report(), "node-1", "k")
        assert excinfo.value.stage == "deliver"
        assert "tls handshake failed" in str(excinfo.value)
