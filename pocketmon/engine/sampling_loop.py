from __future__ import annotations

import asyncio
import logging
from enum import StrEnum

from pocketmon.engine.assembler import SnapshotAssembler
from pocketmon.engine.reporter import Reporter
from pocketmon.engine.ticker import Ticker
from pocketmon.errors import MonitorError, Rejected

logger = logging.getLogger(__name__)


class CycleOutcome(StrEnum):
    SENT = "sent"
    ASSEMBLY_FAILED = "assembly_failed"
    DELIVERY_FAILED = "delivery_failed"
    REJECTED = "rejected"
    ERROR = "error"


class SamplingLoop:
    """Runs sample-then-send cycles: one at startup, then one per tick.

    Cycles run one at a time inside a single background task. A failed
    cycle is logged and the loop waits for the next tick; only
    :meth:`stop` ends it.
    """

    def __init__(
        self,
        assembler: SnapshotAssembler,
        reporter: Reporter,
        node_id: str,
        api_key: str,
        ticker: Ticker,
    ) -> None:
        self.assembler = assembler
        self.reporter = reporter
        self.node_id = node_id
        self._api_key = api_key
        self.ticker = ticker
        self._running = False
        self._task: asyncio.Task | None = None
        self.cycles_run = 0
        self.last_outcome: CycleOutcome | None = None

    # ── lifecycle ────────────────────────────────────────

    async def start(self) -> None:
        if self._running:
            return
        self._running = True
        self._task = asyncio.create_task(self._loop())
        logger.info("Sampling loop started for node %s (interval=%.1fs)", self.node_id, self.ticker.interval)

    async def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
        logger.info("Sampling loop stopped for node %s", self.node_id)

    # ── one cycle ───────────────────────────────────────

    async def run_cycle(self) -> CycleOutcome:
        outcome = await self._cycle()
        self.cycles_run += 1
        self.last_outcome = outcome
        return outcome

    async def _cycle(self) -> CycleOutcome:
        try:
            report = await self.assembler.assemble()
        except asyncio.CancelledError:
            raise
        except MonitorError as exc:
            logger.error("Err collecting stats (%s): %s", exc.stage, exc)
            return CycleOutcome.ASSEMBLY_FAILED
        except Exception:
            logger.exception("Unexpected error while assembling report")
            return CycleOutcome.ERROR

        try:
            await self.reporter.send(report, self.node_id, self._api_key)
        except asyncio.CancelledError:
            raise
        except Rejected as exc:
            logger.error("Err sending stats: Rejected %d %s", exc.status_code, exc.body)
            return CycleOutcome.REJECTED
        except MonitorError as exc:
            logger.error("Err sending stats (%s): %s", exc.stage, exc)
            return CycleOutcome.DELIVERY_FAILED
        except Exception:
            logger.exception("Unexpected error while sending report")
            return CycleOutcome.ERROR

        return CycleOutcome.SENT

    # ── internals ───────────────────────────────────────

    async def _loop(self) -> None:
        self.ticker.reset()
        await self.run_cycle()
        while self._running:
            await self.ticker.tick()
            await self.run_cycle()

    @property
    def running(self) -> bool:
        return self._running
