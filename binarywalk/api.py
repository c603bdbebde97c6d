"""High-level API for binarywalk.

Simple functional interfaces over the traverser and collector classes.
Each traversal function takes an optional starting node and returns the
visited values as a list.
"""

from collections import OrderedDict
from typing import Any, Dict, List, Optional, Union

from .config import ReportConfig, TraversalStrategy, parse_strategy
from .core.collector import DataCollector, ValueCollector
from .core.node import BinaryNode
from .core.traverser import create_traverser


def traverse(
    root: Optional[BinaryNode],
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    collector: Optional[DataCollector] = None,
) -> List[Any]:
    """Walk the tree under ``root`` and collect one entry per visited node.

    Args:
        root: Starting node, or None for an empty tree
        strategy: Traversal strategy (pre, in, post, level)
        collector: What to collect per node (default: node values)

    Returns:
        Collected entries in visitation order

    Example:
        >>> store = NodeStore()
        >>> traverse(store.build(), "level")
        [1, 2, 3, 4, 5, 6, 7, 8, 9]
    """
    traverser = create_traverser(strategy)
    collector = collector or ValueCollector()
    return [collector.collect(node, depth) for node, depth in traverser.traverse(root)]


def preorder(node: Optional[BinaryNode]) -> List[int]:
    """Values in root, left, right order."""
    return traverse(node, TraversalStrategy.PRE_ORDER)


def inorder(node: Optional[BinaryNode]) -> List[int]:
    """Values in left, root, right order."""
    return traverse(node, TraversalStrategy.IN_ORDER)


def postorder(node: Optional[BinaryNode]) -> List[int]:
    """Values in left, right, root order."""
    return traverse(node, TraversalStrategy.POST_ORDER)


def levelorder(node: Optional[BinaryNode]) -> List[int]:
    """Values breadth-first, top row to bottom row, left to right."""
    return traverse(node, TraversalStrategy.LEVEL_ORDER)


def traverse_all(
    root: Optional[BinaryNode],
    strategies: Optional[List[Union[TraversalStrategy, str]]] = None,
) -> Dict[TraversalStrategy, List[int]]:
    """Run several strategies against the same tree.

    Each strategy is run independently and to completion before the next
    one starts.

    Args:
        root: Starting node, or None for an empty tree
        strategies: Strategies to run (default: pre, in, post, level)

    Returns:
        Ordered mapping of strategy to visited values
    """
    if strategies is None:
        strategies = list(ReportConfig().strategies)

    results: Dict[TraversalStrategy, List[int]] = OrderedDict()
    for strategy in strategies:
        parsed = parse_strategy(strategy)
        results[parsed] = traverse(root, parsed)
    return results


def format_line(strategy: Union[TraversalStrategy, str],
                values: List[Any],
                separator: str = " ") -> str:
    """Format one report line, e.g. ``"pre-order: 1 2 4"``."""
    label = parse_strategy(strategy).label
    return f"{label}: {separator.join(str(v) for v in values)}"


def format_report(root: Optional[BinaryNode],
                  config: Optional[ReportConfig] = None) -> List[str]:
    """Build the report lines for every configured strategy.

    Args:
        root: Starting node, or None for an empty tree
        config: Report configuration (default: all four strategies)

    Returns:
        One line per strategy, without trailing newlines

    Raises:
        ValueError: If the configuration is invalid
    """
    config = config or ReportConfig()
    errors = config.validate()
    if errors:
        raise ValueError(f"Invalid report configuration: {'; '.join(errors)}")

    results = traverse_all(root, list(config.strategies))
    return [
        format_line(strategy, values, config.separator)
        for strategy, values in results.items()
    ]
