from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseCollector(ABC, Generic[T]):
    """Abstract base for the per-cycle data sources.

    Subclasses implement ``read()`` which returns one complete record or
    raises a :class:`~pocketmon.errors.MonitorError`. Partial records are
    never returned. Scheduling lives in
    :class:`~pocketmon.engine.sampling_loop.SamplingLoop`.
    """

    name: str = "base"

    @abstractmethod
    async def read(self) -> T:
        """Query the source and return a freshly built record."""
        ...
