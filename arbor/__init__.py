"""
arbor - build navigable trees from flat parent-referencing records.

    from arbor import Tree

    tree = Tree([{"id": 1, "parent": None}, {"id": 2, "parent": 1}])
    tree.get_node_by_id(2).depth  # 2
"""

from arbor.errors import (
    CycleError,
    DanglingParentError,
    DuplicateNodeError,
    InvalidRecordError,
    NotFoundError,
    SelfReferenceError,
    TreeBuildError,
    TreeError,
)
from arbor.node import Node
from arbor.records import NodeId, Record
from arbor.render import RenderConfig, render_lines, render_tree
from arbor.tree import DEFAULT_ROOT_ID, Tree

__all__ = [
    "Tree",
    "Node",
    "NodeId",
    "Record",
    "DEFAULT_ROOT_ID",
    "RenderConfig",
    "render_lines",
    "render_tree",
    "TreeError",
    "TreeBuildError",
    "InvalidRecordError",
    "DuplicateNodeError",
    "DanglingParentError",
    "CycleError",
    "SelfReferenceError",
    "NotFoundError",
]
