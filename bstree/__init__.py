"""
An ordered map backed by a plain binary search tree:

- Keys are ordered by a strict less-than predicate, `<` unless one is given.
  Equality is derived from it: a == b when neither a < b nor b < a.
- Inserting an existing key replaces its value in place.
- Lookups never modify the tree and return a default for missing keys.
- Contents can be dumped in pre-order, in-order (sorted) or post-order.

The tree is never rebalanced and nodes are never removed.

TODO:
 - [ ] Node removal. Would need a free list or tombstones since the arena is
       append only and children are linked by index.
"""
from .tree import Node, OrderedMap, TraverseOrder

__all__ = ["Node", "OrderedMap", "TraverseOrder"]
