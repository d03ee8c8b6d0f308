from .host import HostMetrics, bytes_humanize
from .node import (
    BalanceResponse,
    NodeMetrics,
    NodeQueryResponse,
    StatusResponse,
)
from .report import REPORT_VERSION, Report

__all__ = [
    "HostMetrics",
    "bytes_humanize",
    "NodeMetrics",
    "StatusResponse",
    "NodeQueryResponse",
    "BalanceResponse",
    "Report",
    "REPORT_VERSION",
]
