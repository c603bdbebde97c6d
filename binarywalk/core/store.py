"""NodeStore: the single owner of a binary tree's nodes.

The store allocates every node, wires the left/right links between them and
then freezes the whole structure. Nodes only hold weak references to their
children, so the tree lives exactly as long as the store does.
"""

import logging
from collections import deque
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Set, Tuple

from .node import BinaryNode

logger = logging.getLogger(__name__)


# (parent index, side, child index); node at index i carries value i + 1
Edge = Tuple[int, str, int]

CLASSIC_SIZE = 9

#           1
#         /   \
#        2     3
#       / \   /
#      4   5 6
#     /   / \
#    7   8   9
CLASSIC_WIRING: Tuple[Edge, ...] = (
    (0, "left", 1),
    (0, "right", 2),
    (1, "left", 3),
    (1, "right", 4),
    (2, "left", 5),
    (3, "left", 6),
    (4, "left", 7),
    (4, "right", 8),
)

SIDES = ("left", "right")


class NodeStoreError(Exception):
    """Base class for NodeStore failures."""
    pass


class InvalidWiringError(NodeStoreError):
    """Raised when a wiring table does not describe a single binary tree."""
    pass


class StoreAlreadyBuiltError(NodeStoreError):
    """Raised when build() is called on a store that is already built."""
    pass


class StoreNotBuiltError(NodeStoreError):
    """Raised when nodes are read from a store before build()."""
    pass


class NodeStore:
    """Owns a fixed set of nodes and the edges linking them.

    The default configuration is the classic nine-node example tree.
    ``size``, ``wiring`` and ``node_factory`` are there so test suites can
    plug in instrumented node classes or build tiny boundary trees.

    Example:
        >>> store = NodeStore()
        >>> root = store.build()
        >>> root.left.value
        2
    """

    def __init__(self,
                 size: int = CLASSIC_SIZE,
                 wiring: Sequence[Edge] = CLASSIC_WIRING,
                 node_factory: Callable[[int], BinaryNode] = BinaryNode):
        """Create an unbuilt store and validate its wiring.

        Args:
            size: Number of nodes to allocate (values 1..size)
            wiring: Edges as (parent index, "left"/"right", child index)
            node_factory: Callable creating a node from its value

        Raises:
            InvalidWiringError: If wiring does not form one rooted tree
        """
        self.size = size
        self.wiring = tuple(wiring)
        self._node_factory = node_factory
        self._nodes: Optional[List[BinaryNode]] = None

        problems = validate_wiring(size, self.wiring)
        if problems:
            raise InvalidWiringError(
                f"Invalid wiring: {'; '.join(problems)}"
            )

    def build(self) -> BinaryNode:
        """Allocate, wire and freeze every node, then return the root.

        Nothing is published to the store until wiring has completed, so a
        failure part way through (including MemoryError) leaves the store
        unbuilt rather than half built.

        Returns:
            The root node (value 1)

        Raises:
            StoreAlreadyBuiltError: If the store was built before
        """
        if self._nodes is not None:
            raise StoreAlreadyBuiltError("NodeStore has already been built")

        nodes: List[BinaryNode] = []
        for index in range(self.size):
            node = self._node_factory(index + 1)
            logger.debug(f"Node {node.value} constructed")
            nodes.append(node)

        for parent, side, child in self.wiring:
            setattr(nodes[parent], side, nodes[child])

        for node in nodes:
            node.freeze()

        self._nodes = nodes
        logger.debug(f"NodeStore built: {len(nodes)} nodes, {len(self.wiring)} edges")
        return nodes[0]

    @property
    def is_built(self) -> bool:
        return self._nodes is not None

    @property
    def root(self) -> BinaryNode:
        """The root node (value 1).

        Raises:
            StoreNotBuiltError: If build() has not been called
        """
        return self._require_nodes()[0]

    def node(self, value: int) -> BinaryNode:
        """Look up the canonical node carrying ``value``.

        Raises:
            StoreNotBuiltError: If build() has not been called
            KeyError: If no node carries that value
        """
        nodes = self._require_nodes()
        if not isinstance(value, int) or not 1 <= value <= len(nodes):
            raise KeyError(value)
        return nodes[value - 1]

    def _require_nodes(self) -> List[BinaryNode]:
        if self._nodes is None:
            raise StoreNotBuiltError("NodeStore has not been built yet")
        return self._nodes

    def __len__(self) -> int:
        return len(self._nodes) if self._nodes is not None else 0

    def __iter__(self) -> Iterator[BinaryNode]:
        """Iterate nodes in allocation order (empty before build)."""
        return iter(self._nodes or ())

    def __repr__(self) -> str:
        state = "built" if self.is_built else "unbuilt"
        return f"NodeStore(size={self.size}, edges={len(self.wiring)}, {state})"


def validate_wiring(size: int, wiring: Sequence[Edge]) -> List[str]:
    """Check that ``wiring`` links ``size`` nodes into one tree rooted at index 0.

    Args:
        size: Number of nodes
        wiring: Edges as (parent index, side, child index)

    Returns:
        List of problems (empty if the wiring is valid)
    """
    if size < 1:
        return [f"size must be at least 1, got {size}"]

    problems = []
    slots: Set[Tuple[int, str]] = set()
    parents: Dict[int, int] = {}
    children: Dict[int, List[int]] = {}

    for parent, side, child in wiring:
        if side not in SIDES:
            problems.append(f"unknown side {side!r} on edge {parent}->{child}")
            continue
        if not (0 <= parent < size and 0 <= child < size):
            problems.append(f"edge {parent}->{child} is out of range 0..{size - 1}")
            continue
        if (parent, side) in slots:
            problems.append(f"{side} slot of node {parent} assigned twice")
            continue
        if child in parents:
            problems.append(f"node {child} has two parents ({parents[child]} and {parent})")
            continue
        slots.add((parent, side))
        parents[child] = parent
        children.setdefault(parent, []).append(child)

    if problems:
        return problems

    if 0 in parents:
        problems.append("node 0 must be the root but has a parent")
        return problems

    # Every node has at most one parent, so anything unreachable from the
    # root is either a second root or part of a cycle
    reached = {0}
    queue = deque([0])
    while queue:
        current = queue.popleft()
        for child in children.get(current, []):
            if child not in reached:
                reached.add(child)
                queue.append(child)

    unreachable = sorted(set(range(size)) - reached)
    if unreachable:
        problems.append(
            f"nodes {unreachable} are not reachable from the root "
            f"(disconnected or cyclic)"
        )
    return problems
