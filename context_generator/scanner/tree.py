"""Dry-run tree construction and box-drawing rendering.

Flat relative paths are folded into a transient tree: nodes are looked up in a
table keyed by their path-segment tuple, children are owned by their parent
list, and the whole structure is discarded after printing.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..exclusions.filter import ExclusionReason

BRANCH_MID = "├── "
BRANCH_LAST = "└── "
PREFIX_CONTINUE = "│   "
PREFIX_BLANK = "    "
ROOT_INDENT = "  "
BINARY_NOTE = " (binary, will be skipped)"


@dataclass(frozen=True)
class FileInfo:
    """Classification of one visited entry, recorded for the dry-run report."""

    rel_path: str
    is_dir: bool
    is_text: bool = False
    excluded: bool = False
    reason: ExclusionReason | None = None


@dataclass
class TreeNode:
    """One path segment; nodes without ``file`` are inferred directories."""

    name: str
    file: FileInfo | None = None
    children: list[TreeNode] = field(default_factory=list)
    is_dir: bool = False


def _sort_key(node: TreeNode) -> tuple[bool, str]:
    return (not node.is_dir, node.name)


def sort_tree(node: TreeNode) -> None:
    """Order every node's children below ``node``: directories first, then by name."""
    pending = [node]
    while pending:
        current = pending.pop()
        current.children.sort(key=_sort_key)
        pending.extend(current.children)


def build_file_tree(files: Iterable[FileInfo]) -> TreeNode:
    """Fold ``files`` into a sorted tree under an unnamed root."""
    root = TreeNode(name="", is_dir=True)
    nodes: dict[tuple[str, ...], TreeNode] = {(): root}

    for info in files:
        parts = tuple(info.rel_path.split("/"))
        for depth in range(1, len(parts) + 1):
            key = parts[:depth]
            is_last = depth == len(parts)
            node = nodes.get(key)
            if node is None:
                node = TreeNode(name=parts[depth - 1], is_dir=(not is_last) or info.is_dir)
                nodes[parts[: depth - 1]].children.append(node)
                nodes[key] = node
            if is_last:
                node.file = info
                node.is_dir = info.is_dir

    sort_tree(root)
    return root


def node_label(node: TreeNode, show_reasons: bool) -> str:
    """Return display text for one node, without branch characters."""
    label = node.name
    info = node.file
    if info is None:
        if node.is_dir:
            label += "/"
        return label

    if info.is_dir:
        label += "/"
    elif not info.is_text and not info.excluded:
        label += BINARY_NOTE
    if show_reasons and info.reason is not None:
        label += f" [{info.reason.category}: {info.reason.pattern}]"
    return label


def render_tree(root: TreeNode, show_reasons: bool = False) -> list[str]:
    """Render ``root``'s descendants as box-drawing tree lines."""
    lines: list[str] = []
    # (remaining children, last index, prefix) per level being rendered.
    stack = [(enumerate(root.children), len(root.children) - 1, ROOT_INDENT)]
    while stack:
        children, last_idx, prefix = stack[-1]
        step = next(children, None)
        if step is None:
            stack.pop()
            continue

        idx, child = step
        last = idx == last_idx
        branch = BRANCH_LAST if last else BRANCH_MID
        lines.append(f"{prefix}{branch}{node_label(child, show_reasons)}")
        if child.children:
            child_prefix = prefix + (PREFIX_BLANK if last else PREFIX_CONTINUE)
            stack.append((enumerate(child.children), len(child.children) - 1, child_prefix))
    return lines


__all__ = [
    "FileInfo",
    "TreeNode",
    "build_file_tree",
    "sort_tree",
    "node_label",
    "render_tree",
]
