"""Core abstractions for binarywalk.

Nodes, the store that owns them, the traversal strategies that walk them
and the collectors that decide what each walk reports.
"""

from .node import BinaryNode, FrozenNodeError, NodeCopyError
from .store import (
    NodeStore,
    NodeStoreError,
    InvalidWiringError,
    StoreAlreadyBuiltError,
    StoreNotBuiltError,
    CLASSIC_SIZE,
    CLASSIC_WIRING,
)
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    ValueCollector,
    NodeCollector,
    DepthCollector,
    CustomCollector,
)

__all__ = [
    "BinaryNode",
    "FrozenNodeError",
    "NodeCopyError",
    "NodeStore",
    "NodeStoreError",
    "InvalidWiringError",
    "StoreAlreadyBuiltError",
    "StoreNotBuiltError",
    "CLASSIC_SIZE",
    "CLASSIC_WIRING",
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
]
