from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


def bytes_humanize(b: int) -> str:
    """Render a byte count with SI units, e.g. ``4.3 GB``."""
    unit = 1000
    if b < unit:
        return f"{b} B"
    div, exp = unit, 0
    n = b // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{b / div:.1f} {'kMGTPE'[exp]}B"


def _free_percent(free: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return max(0.0, min(100.0, 100.0 * free / total))


class HostMetrics(BaseModel):
    """Point-in-time snapshot of local host resources (byte counts)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    memory_total: int = Field(ge=0, alias="MemoryTotal")
    memory_free: int = Field(ge=0, alias="MemoryFree")
    disk_total: int = Field(ge=0, alias="DiskTotal")
    disk_free: int = Field(ge=0, alias="DiskFree")
    uptime: int = Field(ge=0, alias="Uptime")
    platform: str = Field(alias="Platform")
    cpu_usage_percent: float = Field(ge=0.0, le=100.0, alias="CPUUsagePercent")

    @property
    def memory_free_percent(self) -> float:
        return _free_percent(self.memory_free, self.memory_total)

    @property
    def disk_free_percent(self) -> float:
        return _free_percent(self.disk_free, self.disk_total)

    def __str__(self) -> str:
        return (
            f"Mem Free:{bytes_humanize(self.memory_free)}({self.memory_free_percent:.0f}%), "
            f"Disk Free:{bytes_humanize(self.disk_free)}({self.disk_free_percent:.0f}%), "
            f"CPU Usage: {self.cpu_usage_percent:.0f}%"
        )
