from .assembler import SnapshotAssembler
from .reporter import Reporter
from .sampling_loop import CycleOutcome, SamplingLoop
from .ticker import Ticker

__all__ = [
    "SnapshotAssembler",
    "Reporter",
    "SamplingLoop",
    "CycleOutcome",
    "Ticker",
]
