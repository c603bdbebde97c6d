"""Configuration system for binarywalk.

Defines the traversal strategies and how their results are reported.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple, Union


class TraversalStrategy(Enum):
    """Order in which a binary tree is walked.

    The enum value doubles as the label used when reporting results.
    """
    PRE_ORDER = "pre-order"      # Root, left subtree, right subtree
    IN_ORDER = "in-order"        # Left subtree, root, right subtree
    POST_ORDER = "post-order"    # Left subtree, right subtree, root
    LEVEL_ORDER = "level-order"  # Breadth-first, top to bottom, left to right

    @property
    def label(self) -> str:
        return self.value


# Accepted spellings for each strategy, all lower case
STRATEGY_ALIASES: Dict[str, TraversalStrategy] = {
    'pre': TraversalStrategy.PRE_ORDER,
    'preorder': TraversalStrategy.PRE_ORDER,
    'pre-order': TraversalStrategy.PRE_ORDER,
    'pre_order': TraversalStrategy.PRE_ORDER,
    'in': TraversalStrategy.IN_ORDER,
    'inorder': TraversalStrategy.IN_ORDER,
    'in-order': TraversalStrategy.IN_ORDER,
    'in_order': TraversalStrategy.IN_ORDER,
    'post': TraversalStrategy.POST_ORDER,
    'postorder': TraversalStrategy.POST_ORDER,
    'post-order': TraversalStrategy.POST_ORDER,
    'post_order': TraversalStrategy.POST_ORDER,
    'level': TraversalStrategy.LEVEL_ORDER,
    'levelorder': TraversalStrategy.LEVEL_ORDER,
    'level-order': TraversalStrategy.LEVEL_ORDER,
    'level_order': TraversalStrategy.LEVEL_ORDER,
    'bfs': TraversalStrategy.LEVEL_ORDER,
}


def parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Convert a strategy name or enum member to a TraversalStrategy.

    Args:
        strategy: Enum member or case-insensitive alias ("pre", "bfs", ...)

    Returns:
        The matching TraversalStrategy

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    key = str(strategy).strip().lower()
    if key not in STRATEGY_ALIASES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(STRATEGY_ALIASES.keys())}"
        )
    return STRATEGY_ALIASES[key]


DEFAULT_REPORT_ORDER: Tuple[TraversalStrategy, ...] = (
    TraversalStrategy.PRE_ORDER,
    TraversalStrategy.IN_ORDER,
    TraversalStrategy.POST_ORDER,
    TraversalStrategy.LEVEL_ORDER,
)


@dataclass
class ReportConfig:
    """How traversal results are written out.

    Each strategy becomes one line: its label, a colon, a space, then the
    visited values joined by ``separator``.
    """

    strategies: Tuple[TraversalStrategy, ...] = field(
        default_factory=lambda: DEFAULT_REPORT_ORDER
    )
    separator: str = " "

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.strategies:
            errors.append("at least one strategy must be reported")

        seen = set()
        for strategy in self.strategies:
            if not isinstance(strategy, TraversalStrategy):
                errors.append(f"{strategy!r} is not a TraversalStrategy")
            elif strategy in seen:
                errors.append(f"{strategy.label} is listed more than once")
            seen.add(strategy)

        if not self.separator:
            errors.append("separator cannot be empty")

        return errors
