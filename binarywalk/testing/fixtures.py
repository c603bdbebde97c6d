"""Test fixtures for binarywalk consumers.

These fixtures count node constructions and destructions so a test suite
can prove that traversals never duplicate or leak nodes, without putting
any instrumentation into the production node class.
"""

import gc
import weakref
from typing import Any, Dict, Sequence

from ..core.node import BinaryNode
from ..core.store import CLASSIC_SIZE, CLASSIC_WIRING, Edge, NodeStore


class LifecycleTracker:
    """Counts node lifecycles for stores built through it.

    Example:
        tracker = LifecycleTracker()
        store = tracker.make_store()
        preorder(store.build())
        del store
        tracker.collect()
        assert tracker.constructed == tracker.destroyed == 9
    """

    def __init__(self):
        self.constructed = 0
        self.destroyed = 0

    def node_factory(self, value: int) -> BinaryNode:
        """Create a node and register it for destruction counting.

        Pass this as ``node_factory`` to a NodeStore.
        """
        node = BinaryNode(value)
        self.constructed += 1
        weakref.finalize(node, self._on_destroyed)
        return node

    def _on_destroyed(self) -> None:
        self.destroyed += 1

    def make_store(self,
                   size: int = CLASSIC_SIZE,
                   wiring: Sequence[Edge] = CLASSIC_WIRING) -> NodeStore:
        """Create an unbuilt NodeStore whose nodes are counted by this tracker."""
        return NodeStore(size=size, wiring=wiring, node_factory=self.node_factory)

    @property
    def alive(self) -> int:
        """Nodes constructed but not yet destroyed."""
        return self.constructed - self.destroyed

    def collect(self) -> None:
        """Force a garbage collection pass so pending finalizers run."""
        gc.collect()

    def get_summary(self) -> Dict[str, Any]:
        """Returns lifecycle counts for assertions or debugging output."""
        return {
            'constructed': self.constructed,
            'destroyed': self.destroyed,
            'alive': self.alive,
            'balanced': self.constructed == self.destroyed,
        }
