from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable

from pocketmon.collectors.base import BaseCollector
from pocketmon.models.host import HostMetrics
from pocketmon.models.node import NodeMetrics
from pocketmon.models.report import REPORT_VERSION, Report

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SnapshotAssembler:
    """Builds one :class:`Report` from the host and node collectors.

    Host first, then node, strictly in sequence. A collector error
    propagates unchanged and no report is produced.
    """

    def __init__(
        self,
        host_collector: BaseCollector[HostMetrics],
        node_collector: BaseCollector[NodeMetrics],
        now: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.host_collector = host_collector
        self.node_collector = node_collector
        self._now = now

    async def assemble(self) -> Report:
        timestamp = self._now().isoformat(timespec="seconds")
        host = await self.host_collector.read()
        node = await self.node_collector.read()

        report = Report(version=REPORT_VERSION, timestamp=timestamp, node=node, host=host)
        logger.info("%s", report.summary())
        return report
