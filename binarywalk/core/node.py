"""BinaryNode abstraction for binarywalk.

The BinaryNode is intentionally kept simple - it's a data container holding
a value and two optional child links. Nodes never own their children: each
link is a weak reference, and the NodeStore that built the nodes is the
only thing keeping them alive.
"""

import weakref
from typing import Iterator, List, Optional


class FrozenNodeError(AttributeError):
    """Raised when a node is modified after its store finished building."""
    pass


class NodeCopyError(TypeError):
    """Raised when something tries to duplicate a node.

    Traversals must visit the single canonical instance of every node,
    so copies (shallow, deep or pickled) are refused outright.
    """
    pass


class BinaryNode:
    """One vertex of a binary tree.

    Equality is identity: two nodes carrying the same value are still two
    different nodes. ``left`` and ``right`` read as plain node references
    (or ``None`` for an absent child) but are stored as weak references.

    Nodes are mutable only until ``freeze()`` is called, which the
    NodeStore does once wiring is complete.
    """

    __slots__ = ("_value", "_left", "_right", "_frozen", "__weakref__")

    def __init__(self, value: int):
        """Initialize an unlinked node.

        Args:
            value: Integer identifying this node in traversal output
        """
        object.__setattr__(self, "_frozen", False)
        object.__setattr__(self, "_left", None)
        object.__setattr__(self, "_right", None)
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        if self._frozen:
            raise FrozenNodeError(
                f"Cannot set {name!r} on {self!r}: node is frozen"
            )
        object.__setattr__(self, name, value)

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = value

    @property
    def left(self) -> Optional["BinaryNode"]:
        return self._deref(self._left, "left")

    @left.setter
    def left(self, child: Optional["BinaryNode"]) -> None:
        self._left = self._link(child)

    @property
    def right(self) -> Optional["BinaryNode"]:
        return self._deref(self._right, "right")

    @right.setter
    def right(self, child: Optional["BinaryNode"]) -> None:
        self._right = self._link(child)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make this node read-only. Cannot be undone."""
        object.__setattr__(self, "_frozen", True)

    def identifier(self) -> str:
        """Return a stable identifier for this node (its value as text)."""
        return str(self._value)

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self._left is None and self._right is None

    def children(self) -> Iterator["BinaryNode"]:
        """Yield present children, left before right."""
        left = self.left
        if left is not None:
            yield left
        right = self.right
        if right is not None:
            yield right

    def _link(self, child: Optional["BinaryNode"]):
        if child is None:
            return None
        if not isinstance(child, BinaryNode):
            raise TypeError(
                f"Child of {self!r} must be a BinaryNode or None, "
                f"got {type(child).__name__}"
            )
        return weakref.ref(child)

    def _deref(self, ref, side: str) -> Optional["BinaryNode"]:
        if ref is None:
            return None
        child = ref()
        if child is None:
            # The owning store was released while this node was still held
            raise ReferenceError(
                f"{side} child of node {self._value} no longer exists"
            )
        return child

    # Copies are refused

    def __copy__(self):
        raise NodeCopyError(f"{self!r} cannot be copied")

    def __deepcopy__(self, memo):
        raise NodeCopyError(f"{self!r} cannot be deep-copied")

    def __reduce_ex__(self, protocol):
        raise NodeCopyError(f"{self!r} cannot be pickled")

    def __str__(self) -> str:
        """String representation defaults to identifier."""
        return self.identifier()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self._value!r})"


def link_values(node: Optional[BinaryNode]) -> List[Optional[int]]:
    """Return ``[left value, right value]`` for a node, ``None`` for absent sides.

    Handy for asserting on wiring without walking the whole tree.
    """
    if node is None:
        return [None, None]
    return [
        node.left.value if node.left is not None else None,
        node.right.value if node.right is not None else None,
    ]
