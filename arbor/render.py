"""
Plain-text outline rendering.

Only reads the public tree surface: the pre-order node list, each node's
depth and its string form.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arbor.node import Node
    from arbor.tree import Tree


@dataclass(frozen=True)
class RenderConfig:
    """Layout of a rendered outline.

    Attributes:
        indent: Indentation unit, repeated once per level below the top.
        marker: Bullet written before each node label.
        line_separator: String placed between lines.
    """

    indent: str = "  "
    marker: str = "- "
    line_separator: str = "\n"


def render_lines(
    tree: Tree,
    config: RenderConfig | None = None,
    formatter: Callable[[Node], str] = str,
) -> list[str]:
    """Render one outline line per node, in pre-order.

    Args:
        tree: Tree to render.
        config: Layout settings. Uses defaults when None.
        formatter: Turns a node into its label. Defaults to the node id.

    Returns:
        Lines of the form ``indent * (depth - 1) + marker + label``.
    """
    cfg = config or RenderConfig()
    return [
        f"{cfg.indent * (node.depth - 1)}{cfg.marker}{formatter(node)}"
        for node in tree.get_all_nodes()
    ]


def render_tree(
    tree: Tree,
    config: RenderConfig | None = None,
    formatter: Callable[[Node], str] = str,
) -> str:
    """Render the whole tree as a single outline string."""
    cfg = config or RenderConfig()
    return cfg.line_separator.join(render_lines(tree, cfg, formatter))
