"""
Tree construction from flat records.

Records reference their parent by id and may arrive in any order. The
tree is built in two passes: every node is created first, then parent and
child links are wired, so a child may appear before its parent.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, ClassVar

from arbor.errors import (
    CycleError,
    DanglingParentError,
    DuplicateNodeError,
    NotFoundError,
    SelfReferenceError,
    TreeBuildError,
)
from arbor.node import Node
from arbor.records import NodeId, coerce_record
from arbor.render import render_tree

logger = logging.getLogger(__name__)

DEFAULT_ROOT_ID: NodeId = 0


class Tree:
    """
    A hierarchy built once from flat records and read-only afterwards.

    All parent-less records hang off a synthetic root whose id is
    ``root_id``. The root is not part of the input and is excluded from
    ``get_all_nodes()`` and ``get_root_nodes()``, but it can be fetched
    with ``get_node_by_id(root_id)``.

    Subclasses may set ``node_class`` to build their nodes from a ``Node``
    subclass.
    """

    node_class: ClassVar[type[Node]] = Node

    def __init__(
        self,
        records: Iterable[Any] = (),
        root_id: NodeId = DEFAULT_ROOT_ID,
    ) -> None:
        """
        Build the tree.

        Args:
            records: Mappings or ``Record`` instances, each with an ``id``,
                an optional ``parent`` and any extra payload fields.
            root_id: Identifier of the synthetic root. Records without a
                parent are attached to it.

        Raises:
            TypeError: If ``root_id`` is not an int or str.
            TreeBuildError: If the records do not form a valid tree. No
                tree is produced in that case.
        """
        if isinstance(root_id, bool) or not isinstance(root_id, (int, str)):
            raise TypeError(
                f"root_id must be an int or str, got {type(root_id).__name__}"
            )

        self._root_id = root_id
        try:
            self._nodes = self._build(records)
        except TreeBuildError as exc:
            logger.warning("Tree build failed: %s", exc)
            raise

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Built tree with %d nodes (root=%r, max_depth=%d)",
                len(self),
                root_id,
                self.max_depth,
            )

    def _build(self, records: Iterable[Any]) -> Mapping[NodeId, Node]:
        """Create, wire and validate every node.

        Returns:
            Read-only id -> node mapping, root included.
        """
        nodes: dict[NodeId, Node] = {}
        index = MappingProxyType(nodes)
        pending: dict[NodeId, list[NodeId]] = {}
        root_id = self._root_id

        nodes[root_id] = self._create_node(
            root_id, MappingProxyType({"id": root_id}), index
        )

        # Pass 1: one node per record, children grouped by parent id
        for position, row in enumerate(records):
            record, payload = coerce_record(row, position)
            parent_id = root_id if record.parent is None else record.parent

            if record.id in nodes:
                raise DuplicateNodeError(record.id, is_root=record.id == root_id)
            nodes[record.id] = self._create_node(
                record.id, MappingProxyType(payload), index
            )
            pending.setdefault(parent_id, []).append(record.id)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Wiring %d records (root=%r, forward references=%d)",
                len(nodes) - 1,
                root_id,
                _count_forward_references(nodes, pending),
            )

        # Pass 2: wire links in per-parent insertion order
        for parent_id, child_ids in pending.items():
            for child_id in child_ids:
                if parent_id == child_id:
                    raise SelfReferenceError(child_id)
                if parent_id not in nodes:
                    raise DanglingParentError(child_id, parent_id)
            nodes[parent_id]._adopt([nodes[child_id] for child_id in child_ids])

        # Every node has one parent now; anything the root cannot reach is
        # stuck in a parent loop
        root = nodes[root_id]
        reached = {root_id}
        reached.update(node.id for node in root.iter_descendants())
        if len(reached) != len(nodes):
            raise CycleError(node_id for node_id in nodes if node_id not in reached)

        return index

    def _create_node(
        self,
        node_id: NodeId,
        data: Mapping[Any, Any],
        index: Mapping[NodeId, Node],
    ) -> Node:
        """Create a node. Override, or set ``node_class``, to customise."""
        return self.node_class(node_id, data, index)

    # ------------------------------------------------------------------
    # Lookup and traversal
    # ------------------------------------------------------------------

    @property
    def root_id(self) -> NodeId:
        return self._root_id

    @property
    def root(self) -> Node:
        """The synthetic root node."""
        return self._nodes[self._root_id]

    @property
    def nodes(self) -> Mapping[NodeId, Node]:
        """Read-only id -> node mapping, root included."""
        return self._nodes

    @property
    def max_depth(self) -> int:
        """Depth of the deepest node (0 for an empty tree)."""
        deepest = 0
        stack = [(self.root, 0)]
        while stack:
            node, depth = stack.pop()
            deepest = max(deepest, depth)
            stack.extend((child, depth + 1) for child in node.children)
        return deepest

    def get_node_by_id(self, node_id: NodeId) -> Node:
        """
        Return a single node by its id.

        Raises:
            NotFoundError: If no node has that id.
        """
        try:
            return self._nodes[node_id]
        except (KeyError, TypeError):
            raise NotFoundError(node_id) from None

    def get_root_nodes(self) -> list[Node]:
        """Top-level nodes (children of the synthetic root), in input order."""
        return list(self.root.children)

    def get_all_nodes(self) -> list[Node]:
        """
        Return every node except the root, in pre-order.

        Each node is followed by its whole subtree before its next sibling,
        which is the order an outline of the tree shows.
        """
        return self.root.get_descendants()

    def __iter__(self) -> Iterator[Node]:
        return self.root.iter_descendants()

    def __len__(self) -> int:
        return len(self._nodes) - 1

    def __str__(self) -> str:
        return render_tree(self)

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<Tree root={self._root_id!r} nodes={len(self)} depth={self.max_depth}>"


def _count_forward_references(
    nodes: Mapping[NodeId, Node],
    pending: Mapping[NodeId, list[NodeId]],
) -> int:
    """Count records listed before the parent they point to."""
    positions = {node_id: position for position, node_id in enumerate(nodes)}
    return sum(
        1
        for parent_id, child_ids in pending.items()
        if parent_id in positions
        for child_id in child_ids
        if positions[parent_id] > positions[child_id]
    )
