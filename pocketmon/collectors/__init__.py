from .base import BaseCollector
from .host_collector import HostCollector
from .node_collector import NodeCollector

__all__ = [
    "BaseCollector",
    "HostCollector",
    "NodeCollector",
]
