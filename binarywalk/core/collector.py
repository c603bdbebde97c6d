"""Data collection strategies for binarywalk.

Collectors decide what a traversal reports for each visited node. The
same walk can produce plain values, the node instances themselves, or
values tagged with their depth.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Tuple

from .node import BinaryNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    @abstractmethod
    def collect(self, node: BinaryNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node being visited
            depth: Depth of the node relative to the traversal start

        Returns:
            Collected data (type depends on collector)
        """
        pass


class ValueCollector(DataCollector):
    """Collects node values. This is what traversals report by default."""

    def collect(self, node: BinaryNode, depth: int) -> int:
        return node.value


class NodeCollector(DataCollector):
    """Collects the visited node instances themselves.

    Useful for checking identity: every entry is the canonical node owned
    by the store, never a copy.
    """

    def collect(self, node: BinaryNode, depth: int) -> BinaryNode:
        return node


class DepthCollector(DataCollector):
    """Collects ``(value, depth)`` pairs."""

    def collect(self, node: BinaryNode, depth: int) -> Tuple[int, int]:
        return (node.value, depth)


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, collect_func: Callable[[BinaryNode, int], Any]):
        """Initialize with custom collection function.

        Args:
            collect_func: Function(node, depth) -> Any
        """
        self.collect_func = collect_func

    def collect(self, node: BinaryNode, depth: int) -> Any:
        """Use custom function to collect data."""
        return self.collect_func(node, depth)
