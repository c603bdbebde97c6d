"""binarywalk - Classic binary tree traversals.

Builds a fixed nine-node binary tree and walks it four ways: pre-order,
in-order, post-order and level-order.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from binarywalk import NodeStore, preorder

    store = NodeStore()
    root = store.build()
    preorder(root)   # [1, 2, 4, 7, 5, 8, 9, 3, 6]
━━━━━━━━━━━━━━━━━━━━━━━━━━

Keep the store around for as long as you use the tree: it is the only
owner of the nodes.
"""

__version__ = "0.1.0"

from .core import (
    BinaryNode,
    FrozenNodeError,
    NodeCopyError,
    NodeStore,
    NodeStoreError,
    InvalidWiringError,
    StoreAlreadyBuiltError,
    StoreNotBuiltError,
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    DataCollector,
    ValueCollector,
    NodeCollector,
    DepthCollector,
    CustomCollector,
)
from .config import TraversalStrategy, ReportConfig
from .api import (
    traverse,
    preorder,
    inorder,
    postorder,
    levelorder,
    traverse_all,
    format_line,
    format_report,
)

__all__ = [
    "__version__",
    # Core
    "BinaryNode",
    "FrozenNodeError",
    "NodeCopyError",
    "NodeStore",
    "NodeStoreError",
    "InvalidWiringError",
    "StoreAlreadyBuiltError",
    "StoreNotBuiltError",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "DataCollector",
    "ValueCollector",
    "NodeCollector",
    "DepthCollector",
    "CustomCollector",
    # Config
    "TraversalStrategy",
    "ReportConfig",
    # API
    "traverse",
    "preorder",
    "inorder",
    "postorder",
    "levelorder",
    "traverse_all",
    "format_line",
    "format_report",
]
