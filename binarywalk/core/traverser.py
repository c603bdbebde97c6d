"""Tree traversal strategies for binarywalk.

Traversers implement the four classic orders for walking a binary tree.
Every traverser is read-only: it borrows nodes from the store, yields them
with their depth, and never keeps a reference once the walk is over.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, Optional, Tuple, Union

from ..config import TraversalStrategy, parse_strategy
from .node import BinaryNode


class TreeTraverser(ABC):
    """Abstract base class for binary tree traversal strategies.

    An absent root is the base case, not an error: traversing ``None``
    yields nothing.
    """

    strategy: TraversalStrategy

    @abstractmethod
    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node, or None for an empty tree

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Visits a node, then its left subtree, then its right subtree.
    """

    strategy = TraversalStrategy.PRE_ORDER

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        """Traverse tree depth-first, root first.

        Uses recursion (via generator) for natural depth-first behavior.
        """
        def _traverse_recursive(node: Optional[BinaryNode], depth: int):
            if node is None:
                return
            yield (node, depth)
            yield from _traverse_recursive(node.left, depth + 1)
            yield from _traverse_recursive(node.right, depth + 1)

        yield from _traverse_recursive(root, 0)


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal.

    Visits the left subtree, then the node, then the right subtree. This
    only produces sorted output when the tree is a search tree.
    """

    strategy = TraversalStrategy.IN_ORDER

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        def _traverse_recursive(node: Optional[BinaryNode], depth: int):
            if node is None:
                return
            yield from _traverse_recursive(node.left, depth + 1)
            yield (node, depth)
            yield from _traverse_recursive(node.right, depth + 1)

        yield from _traverse_recursive(root, 0)


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal.

    Visits both subtrees before the node itself, so a node is only
    yielded once everything below it has been.
    """

    strategy = TraversalStrategy.POST_ORDER

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        """Traverse tree depth-first, root last."""
        def _traverse_recursive(node: Optional[BinaryNode], depth: int):
            if node is None:
                return
            yield from _traverse_recursive(node.left, depth + 1)
            yield from _traverse_recursive(node.right, depth + 1)
            yield (node, depth)

        yield from _traverse_recursive(root, 0)


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Visits every node at depth N before any node at depth N+1, left to
    right within a level.
    """

    strategy = TraversalStrategy.LEVEL_ORDER

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        """Traverse tree breadth-first using a FIFO queue."""
        if root is None:
            return

        queue: Deque[Tuple[BinaryNode, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()
            yield (node, depth)

            left = node.left
            if left is not None:
                queue.append((left, depth + 1))
            right = node.right
            if right is not None:
                queue.append((right, depth + 1))


_TRAVERSERS = {
    TraversalStrategy.PRE_ORDER: PreOrderTraverser,
    TraversalStrategy.IN_ORDER: InOrderTraverser,
    TraversalStrategy.POST_ORDER: PostOrderTraverser,
    TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
}


# Factory function for creating traversers by name
def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy member or alias (pre, in, post, level, bfs, ...)

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _TRAVERSERS[parse_strategy(strategy)]()
