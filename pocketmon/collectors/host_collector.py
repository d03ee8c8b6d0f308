from __future__ import annotations

import platform
import time

import psutil

from pocketmon.collectors.base import BaseCollector
from pocketmon.errors import ResourceQueryFailed
from pocketmon.models.host import HostMetrics


def root_path() -> str:
    """Filesystem root whose usage is reported for this OS."""
    return "C:\\" if psutil.WINDOWS else "/"


class HostCollector(BaseCollector[HostMetrics]):
    """Reads memory, disk, CPU, platform and uptime from the local OS.

    All-or-nothing: if any query fails the whole read fails.
    """

    name = "host_collector"

    def __init__(self, disk_path: str | None = None) -> None:
        self.disk_path = disk_path or root_path()
        # First non-blocking sample is always 0.0; prime the counter.
        psutil.cpu_percent(interval=None)

    async def read(self) -> HostMetrics:
        try:
            vm = psutil.virtual_memory()
            du = psutil.disk_usage(self.disk_path)
            cpu_percent = psutil.cpu_percent(interval=0)
            uptime = max(0, int(time.time() - psutil.boot_time()))
        except (psutil.Error, OSError) as exc:
            raise ResourceQueryFailed(f"host query failed: {exc}") from exc

        return HostMetrics(
            memory_total=vm.total,
            memory_free=vm.available,
            disk_total=du.total,
            disk_free=du.free,
            uptime=uptime,
            platform=platform.system().lower(),
            cpu_usage_percent=cpu_percent,
        )
