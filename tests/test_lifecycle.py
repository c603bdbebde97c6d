"""Tests proving traversals never duplicate or leak nodes.

Uses LifecycleTracker to count node constructions and destructions: the
number of nodes built, constructed and destroyed must all match.
"""

import unittest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from binarywalk import NodeCollector, traverse, traverse_all
from binarywalk.testing import LifecycleTracker


class TestNodeLifecycle(unittest.TestCase):
    """Construction/destruction counting around full traversal runs."""

    def test_build_constructs_exactly_nine(self):
        tracker = LifecycleTracker()
        store = tracker.make_store()
        self.assertEqual(tracker.constructed, 0)

        store.build()
        self.assertEqual(tracker.constructed, 9)
        self.assertEqual(tracker.destroyed, 0)
        self.assertEqual(tracker.alive, 9)

    def test_traversals_create_no_nodes(self):
        tracker = LifecycleTracker()
        store = tracker.make_store()
        root = store.build()

        for _ in range(3):
            traverse_all(root)
            traverse(root, "level", NodeCollector())

        self.assertEqual(tracker.constructed, 9)
        self.assertEqual(tracker.destroyed, 0)

    def test_release_destroys_every_node_once(self):
        tracker = LifecycleTracker()
        store = tracker.make_store()
        root = store.build()
        traverse_all(root)

        del root
        del store
        tracker.collect()

        self.assertEqual(tracker.get_summary(), {
            'constructed': 9,
            'destroyed': 9,
            'alive': 0,
            'balanced': True,
        })

    def test_store_alone_keeps_nodes_alive(self):
        """Dropping the root reference does not release anything."""
        tracker = LifecycleTracker()
        store = tracker.make_store()
        root = store.build()
        del root
        tracker.collect()

        self.assertEqual(tracker.alive, 9)
        self.assertEqual(traverse(store.root, "pre"), [1, 2, 4, 7, 5, 8, 9, 3, 6])

    def test_released_store_leaves_no_reachable_children(self):
        tracker = LifecycleTracker()
        store = tracker.make_store()
        root = store.build()

        # Holding only the root does not extend its children's lifetime
        del store
        tracker.collect()
        self.assertEqual(tracker.alive, 1)
        with self.assertRaises(ReferenceError):
            root.left

    def test_single_node_store(self):
        tracker = LifecycleTracker()
        store = tracker.make_store(size=1, wiring=())
        traverse_all(store.build())
        del store
        tracker.collect()
        self.assertEqual((tracker.constructed, tracker.destroyed), (1, 1))


if __name__ == "__main__":
    unittest.main()
