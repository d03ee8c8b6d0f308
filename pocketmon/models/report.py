from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from pocketmon.models.host import HostMetrics
from pocketmon.models.node import NodeMetrics

REPORT_VERSION = "v1"


class Report(BaseModel):
    """One cycle's snapshot as delivered to the collector. Never persisted."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str = REPORT_VERSION
    timestamp: str
    node: NodeMetrics
    host: HostMetrics

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> Report:
        return cls.model_validate_json(data)

    def summary(self) -> str:
        return f"\n\tHost: {self.host}\n\tNode: {self.node}"
