"""
A plain, unbalanced binary search tree used as an ordered map.

Nodes live in an append only list (the arena) and refer to their children by
index into that list instead of holding references to other nodes. The first
node appended is always the root. Nothing is ever removed from the arena, so
an index stays valid for as long as the tree exists.

There is no rebalancing. The shape of the tree is whatever the insertion order
makes it, so inserting keys in sorted order degrades it to a linked list. All
the walks below use loops or an explicit stack so a degenerate tree never hits
the interpreter's recursion limit.

The tree is not thread safe. Any number of readers may share it, but an insert
must not overlap with any other call on the same tree.
"""
import logging
import operator
from enum import Enum

from .settings import DEFAULT_TRAVERSE_ORDER

logger = logging.getLogger(__name__)


class TraverseOrder(Enum):
    PRE_ORDER = "pre"
    IN_ORDER = "in"
    POST_ORDER = "post"


# The sequence of steps taken at every node for each traversal order.
_NODE, _LEFT, _RIGHT = "node", "left", "right"
_STEPS = {
    TraverseOrder.PRE_ORDER: (_NODE, _LEFT, _RIGHT),
    TraverseOrder.IN_ORDER: (_LEFT, _NODE, _RIGHT),
    TraverseOrder.POST_ORDER: (_LEFT, _RIGHT, _NODE),
}


class Node:
    def __init__(self, key, value):
        self.key = key
        self.value = value
        # index of the child in the arena, None when there is no child
        self.left = None
        self.right = None


class OrderedMap:
    """
    Maps unique keys to values, ordered by `less`.

    `less(a, b)` must be a strict weak ordering over the keys and defaults to
    the natural `<`. Two keys are considered equal when neither is less than
    the other. The ordering must not change once something has been inserted,
    otherwise lookups and traversals silently return wrong results. None of
    this is checked.
    """

    def __init__(self, less=None):
        self._less = less if less is not None else operator.lt
        self._nodes = []

    def __len__(self):
        return len(self._nodes)

    def _append(self, key, value):
        self._nodes.append(Node(key, value))
        return len(self._nodes) - 1

    def insert(self, key, value):
        """
        Add `key` with `value`, or replace the value if `key` is already in
        the tree. Replacing never adds a node or changes a link.
        """
        if not self._nodes:
            logger.debug("creating root node for key %r", key)
            self._append(key, value)
            return

        current = self._nodes[0]
        while True:
            if self._less(current.key, key):
                if current.right is None:
                    current.right = self._append(key, value)
                    return
                current = self._nodes[current.right]
            elif not self._less(key, current.key):
                current.value = value
                return
            else:
                if current.left is None:
                    current.left = self._append(key, value)
                    return
                current = self._nodes[current.left]

    def _find_node(self, key):
        if not self._nodes:
            return None

        current = self._nodes[0]
        while True:
            if self._less(current.key, key):
                if current.right is None:
                    return None
                current = self._nodes[current.right]
            elif not self._less(key, current.key):
                return current
            else:
                if current.left is None:
                    return None
                current = self._nodes[current.left]

    def find(self, key, default=None):
        node = self._find_node(key)
        if node is None:
            return default
        return node.value

    def traverse(self, order=DEFAULT_TRAVERSE_ORDER):
        """
        Return a new list of `(key, value)` pairs in the requested order.

        `order` is a `TraverseOrder` or one of its values ("pre", "in",
        "post"). In-order yields the pairs sorted by key.
        """
        return list(self._walk(TraverseOrder(order)))

    def _walk(self, order):
        if not self._nodes:
            return

        steps = _STEPS[order]
        # (index, visit) pairs. visit=False means the node still has to be
        # expanded into its steps, visit=True means emit it now.
        stack = [(0, False)]
        while stack:
            index, visit = stack.pop()
            node = self._nodes[index]
            if visit:
                yield node.key, node.value
                continue

            for step in reversed(steps):
                if step == _NODE:
                    stack.append((index, True))
                elif step == _LEFT and node.left is not None:
                    stack.append((node.left, False))
                elif step == _RIGHT and node.right is not None:
                    stack.append((node.right, False))

    def depth(self):
        """
        Number of nodes on the longest path from the root down to a leaf.
        """
        if not self._nodes:
            return 0

        deepest = 0
        stack = [(0, 1)]
        while stack:
            index, level = stack.pop()
            node = self._nodes[index]
            deepest = max(deepest, level)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, level + 1))
        return deepest

    def get(self, key, default=None):
        return self.find(key, default)

    def __getitem__(self, key):
        node = self._find_node(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __contains__(self, key):
        return self._find_node(key) is not None

    def __iter__(self):
        return iter([key for key, _ in self.traverse(TraverseOrder.IN_ORDER)])

    def items(self):
        return iter(self.traverse(TraverseOrder.IN_ORDER))
