"""Exceptions raised while building and querying trees.

Construction failures derive from ``TreeBuildError`` and abort the whole
build. Lookup failures derive from ``NotFoundError`` and leave the tree
usable.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class TreeError(Exception):
    """Base class for every error raised by arbor."""


class TreeBuildError(TreeError):
    """Raised when flat records cannot be turned into a valid tree."""


class InvalidRecordError(TreeBuildError):
    """Raised when an input record is malformed.

    Attributes:
        position: Zero-based index of the record in the input sequence.
        record: The offending record, as supplied.
    """

    def __init__(self, position: int, record: Any, reason: str) -> None:
        self.position = position
        self.record = record
        super().__init__(f"Invalid record at position {position}: {reason}")


class DuplicateNodeError(TreeBuildError):
    """Raised when two records share an id, or a record reuses the root id.

    Attributes:
        node_id: The repeated identifier.
    """

    def __init__(self, node_id: Any, is_root: bool = False) -> None:
        self.node_id = node_id
        if is_root:
            message = f"Node (ID {node_id}) collides with the root node id"
        else:
            message = f"Node (ID {node_id}) appears more than once"
        super().__init__(message)


class DanglingParentError(TreeBuildError):
    """Raised when a record points to a parent that does not exist.

    Attributes:
        node_id: Identifier of the child record.
        parent_id: The missing parent identifier.
    """

    def __init__(self, node_id: Any, parent_id: Any) -> None:
        self.node_id = node_id
        self.parent_id = parent_id
        super().__init__(
            f"Node with ID {node_id} points to non-existent parent with ID {parent_id}"
        )


class CycleError(TreeBuildError):
    """Raised when parent links form a loop that never reaches the root.

    Attributes:
        node_ids: Identifiers of the nodes caught in the loop, in input order.
    """

    def __init__(self, node_ids: Iterable[Any], message: str | None = None) -> None:
        self.node_ids = tuple(node_ids)
        if message is None:
            listed = ", ".join(str(node_id) for node_id in self.node_ids)
            message = f"Nodes are not reachable from the root (parent cycle): {listed}"
        super().__init__(message)


class SelfReferenceError(CycleError):
    """Raised when a record declares itself as its own parent.

    Attributes:
        node_id: Identifier of the record.
    """

    def __init__(self, node_id: Any) -> None:
        self.node_id = node_id
        super().__init__(
            (node_id,), f"Node (ID {node_id}) references itself as parent"
        )


class NotFoundError(TreeError, LookupError):
    """Raised when a lookup names an id the tree does not hold.

    Attributes:
        node_id: The identifier that was looked up.
    """

    def __init__(self, node_id: Any) -> None:
        self.node_id = node_id
        super().__init__(f"Invalid node id {node_id!r}")
