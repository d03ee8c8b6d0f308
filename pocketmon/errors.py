"""Failure taxonomy for a single sampling cycle.

Every error is local to the cycle that raised it. ``stage`` names the part
of the cycle that failed so the loop can log it without inspecting types.
"""

from __future__ import annotations


class MonitorError(Exception):
    stage: str = "cycle"


class ResourceQueryFailed(MonitorError):
    """Host metrics could not be read."""

    stage = "host"


class NodeQueryFailed(MonitorError):
    """The local node RPC could not be reached or answered with an error."""

    stage = "node"

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class MalformedResponse(MonitorError):
    """A node RPC payload did not have the expected shape."""

    stage = "node"

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class SerializationFailed(MonitorError):
    stage = "serialize"


class DeliveryFailed(MonitorError):
    """The collector endpoint was unreachable."""

    stage = "deliver"


class Rejected(MonitorError):
    """The collector answered with status >= 400."""

    stage = "deliver"

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"{status_code} {body}")
        self.status_code = status_code
        self.body = body
