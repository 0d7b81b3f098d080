"""
Tree node and relationship queries.

A node never holds other nodes directly. Its parent and children are kept
as identifiers and resolved through the index shared with the owning
``Tree``, so the tree's id -> node mapping is the single owner of every
node.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from arbor.records import NodeId


class Node:
    """
    A single cell of the hierarchy.

    Each node carries:
    - its identifier and the record payload it was built from
    - the identifier of its parent (None for the synthetic root)
    - the ordered identifiers of its children

    Nodes are created and wired by ``Tree`` and are read-only afterwards.
    """

    __slots__ = ("_id", "_data", "_parent_id", "_child_ids", "_index")

    def __init__(
        self,
        node_id: NodeId,
        data: Mapping[Any, Any],
        index: Mapping[NodeId, Node],
    ) -> None:
        self._id = node_id
        self._data = data
        self._parent_id: NodeId | None = None
        self._child_ids: tuple[NodeId, ...] = ()
        self._index = index

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def id(self) -> NodeId:
        return self._id

    @property
    def data(self) -> Mapping[Any, Any]:
        """The record this node was built from, including ``id`` and ``parent``."""
        return self._data

    @property
    def parent_id(self) -> NodeId | None:
        """Resolved parent id; the root id for top-level records, None for the root."""
        return self._parent_id

    @property
    def parent(self) -> Node | None:
        if self._parent_id is None:
            return None
        return self._index[self._parent_id]

    @property
    def children(self) -> tuple[Node, ...]:
        """Direct children in the order they were attached."""
        return tuple(self._index[child_id] for child_id in self._child_ids)

    @property
    def depth(self) -> int:
        """Get depth of this node in the tree (root = 0)."""
        depth = 0
        current = self.parent
        while current is not None:
            depth += 1
            current = current.parent
        return depth

    def has_children(self) -> bool:
        return len(self._child_ids) > 0

    def count_children(self) -> int:
        return len(self._child_ids)

    # ------------------------------------------------------------------
    # Siblings
    # ------------------------------------------------------------------

    def get_previous_sibling(self) -> Node | None:
        """Return the sibling just before this node, or None if it is first."""
        return self.get_sibling(-1)

    def get_next_sibling(self) -> Node | None:
        """Return the sibling just after this node, or None if it is last."""
        return self.get_sibling(1)

    def get_sibling(self, offset: int) -> Node | None:
        """
        Return the sibling ``offset`` positions away from this node.

        Args:
            offset: 1 for the next sibling, -1 for the previous one.
                Larger magnitudes walk further along the parent's children.

        Returns:
            The sibling, or None when the position falls outside the
            parent's children or this node is the root.
        """
        if self._parent_id is None:
            return None

        sibling_ids = self._index[self._parent_id]._child_ids
        target = sibling_ids.index(self._id) + offset
        if 0 <= target < len(sibling_ids):
            return self._index[sibling_ids[target]]
        return None

    def get_siblings(self) -> list[Node]:
        """All other children of this node's parent, in order."""
        return [node for node in self.get_siblings_and_self() if node is not self]

    def get_siblings_and_self(self) -> list[Node]:
        """All children of this node's parent, this node included."""
        parent = self.parent
        if parent is None:
            return []
        return list(parent.children)

    # ------------------------------------------------------------------
    # Ancestors and descendants
    # ------------------------------------------------------------------

    def get_ancestors(self) -> list[Node]:
        """
        Return every node above this one, nearest first.

        The synthetic root is the last element. Empty for the root itself.
        """
        ancestors = []
        current = self.parent
        while current is not None:
            ancestors.append(current)
            current = current.parent
        return ancestors

    def get_ancestors_and_self(self) -> list[Node]:
        return [self, *self.get_ancestors()]

    def iter_descendants(self) -> Iterator[Node]:
        """
        Yield every node below this one in pre-order.

        Given:
        - A
          - A1
          - A2
        - B
          - B1

        nodes are yielded as A, A1, A2, B, B1.
        """
        stack = list(reversed(self._child_ids))
        while stack:
            node = self._index[stack.pop()]
            yield node
            stack.extend(reversed(node._child_ids))

    def get_descendants(self) -> list[Node]:
        """Get all descendants as a flat list (pre-order)."""
        return list(self.iter_descendants())

    def get_descendants_and_self(self) -> list[Node]:
        return [self, *self.iter_descendants()]

    # ------------------------------------------------------------------
    # Build-time wiring, used by Tree only
    # ------------------------------------------------------------------

    def _adopt(self, children: Sequence[Node]) -> None:
        """Make *children* this node's children, in the given order."""
        self._child_ids = tuple(child._id for child in children)
        for child in children:
            child._parent_id = self._id

    def __str__(self) -> str:
        return str(self._id)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Node {self._id!r} depth={self.depth} children={len(self._child_ids)}>"
