#!/usr/bin/env python3
"""
Bintree - A minimal binary tree with recursive traversals and counts.

Architecture: Functional Core, Imperative Shell
- Data: a mutable Node plus immutable result dataclasses
- Computations: pure recursive functions (no I/O, no printing)
- Renderers: pure functions (data → str)
- Actions: write to a sink / read files at edges only
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Any, Literal, Mapping, Sequence, TextIO


# =============================================================================
# DOMAIN TYPES (Data)
# =============================================================================


@dataclass
class Node:
    """One vertex of a binary tree. Children are attached by assignment."""

    value: int
    left: Node | None = None
    right: Node | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


class TraversalOrder(Enum):
    """Depth-first visit order."""

    PRE = auto()
    IN = auto()
    POST = auto()


@dataclass(frozen=True)
class TreeSummary:
    """Aggregates reported for a tree (pure data)."""

    post_order: tuple[int, ...]
    node_count: int
    depth: int
    leaf_count: int


class TreeFormatError(ValueError):
    """Raised when a nested mapping does not describe a tree."""


# =============================================================================
# PURE FUNCTIONS (Computations) - No I/O, no side effects, no printing
# =============================================================================


def _collect(root: Node | None, order: TraversalOrder, acc: list[int]) -> None:
    """Append visited values to `acc` in the given order."""
    if root is None:
        return
    if order is TraversalOrder.PRE:
        acc.append(root.value)
    _collect(root.left, order, acc)
    if order is TraversalOrder.IN:
        acc.append(root.value)
    _collect(root.right, order, acc)
    if order is TraversalOrder.POST:
        acc.append(root.value)


def pre_order_values(root: Node | None) -> tuple[int, ...]:
    """Root, then left subtree, then right subtree."""
    acc: list[int] = []
    _collect(root, TraversalOrder.PRE, acc)
    return tuple(acc)


def in_order_values(root: Node | None) -> tuple[int, ...]:
    """Left subtree, then root, then right subtree."""
    acc: list[int] = []
    _collect(root, TraversalOrder.IN, acc)
    return tuple(acc)


def post_order_values(root: Node | None) -> tuple[int, ...]:
    """Left subtree, then right subtree, then root."""
    acc: list[int] = []
    _collect(root, TraversalOrder.POST, acc)
    return tuple(acc)


def traverse(root: Node | None, order: TraversalOrder) -> tuple[int, ...]:
    """Dispatch to the traversal for `order`. Pure: (Node, order) -> values"""
    match order:
        case TraversalOrder.PRE:
            return pre_order_values(root)
        case TraversalOrder.IN:
            return in_order_values(root)
        case TraversalOrder.POST:
            return post_order_values(root)


def count_nodes(root: Node | None) -> int:
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def count_depth(root: Node | None) -> int:
    """
    Height of the subtree, counted in levels.

    A lone node has depth 1; an absent root has depth 0.
    """
    if root is None:
        return 0
    return 1 + max(count_depth(root.left), count_depth(root.right))


def count_leaf_nodes(root: Node | None) -> int:
    if root is None:
        return 0
    if root.is_leaf:
        return 1
    return count_leaf_nodes(root.left) + count_leaf_nodes(root.right)


def summarize(root: Node | None) -> TreeSummary:
    """
    Collect the reported aggregates for a tree.

    Pure: Node | None -> TreeSummary
    """
    return TreeSummary(
        post_order=post_order_values(root),
        node_count=count_nodes(root),
        depth=count_depth(root),
        leaf_count=count_leaf_nodes(root),
    )


def build_example_tree() -> Node:
    """Build the fixed nine-node example tree."""
    root = Node(1)
    root.left = Node(2)
    root.right = Node(3)
    root.left.left = Node(4)
    root.left.right = Node(5)
    root.left.left.left = Node(6)
    root.left.left.right = Node(7)
    root.right.left = Node(8)
    root.right.left.right = Node(9)
    return root


def tree_from_dict(data: Mapping[str, Any] | None) -> Node | None:
    """
    Build a tree from nested {"value", "left", "right"} mappings.

    Pure: Mapping | None -> Node | None
    Raises TreeFormatError on malformed input.
    """
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise TreeFormatError(f"expected a mapping or null, got {type(data).__name__}")

    value = data.get("value")
    # bool is an int subclass but never a valid value
    if not isinstance(value, int) or isinstance(value, bool):
        raise TreeFormatError(f"node value must be an integer, got {value!r}")

    return Node(
        value,
        left=tree_from_dict(data.get("left")),
        right=tree_from_dict(data.get("right")),
    )


def tree_to_dict(root: Node | None) -> dict[str, Any] | None:
    """Inverse of tree_from_dict. Pure: Node | None -> dict | None"""
    if root is None:
        return None
    return {
        "value": root.value,
        "left": tree_to_dict(root.left),
        "right": tree_to_dict(root.right),
    }


# =============================================================================
# RENDERERS (Pure: Data -> str)
# =============================================================================


def render_traversal(values: Sequence[int], sep: str = " ") -> str:
    """Render each value followed by `sep`. Pure: Sequence[int] -> str."""
    return "".join(f"{v}{sep}" for v in values)


def render_summary_text(summary: TreeSummary) -> str:
    """Render post-order, node count and depth, one per line. Pure."""
    lines: list[str] = [
        render_traversal(summary.post_order),
        str(summary.node_count),
        str(summary.depth),
    ]
    return "\n".join(lines)


def render_summary_json(summary: TreeSummary) -> str:
    """Render summary as JSON. Pure: TreeSummary -> str."""
    data = {
        "post_order": list(summary.post_order),
        "node_count": summary.node_count,
        "depth": summary.depth,
        "leaf_count": summary.leaf_count,
    }
    return json.dumps(data, indent=2)


def render_error(message: str) -> str:
    """Render an error message. Pure: str -> str."""
    return f"Error: {message}"


# =============================================================================
# ACTIONS (Effects) - I/O happens here only
# =============================================================================


def emit_traversal(
    root: Node | None,
    order: TraversalOrder,
    sink: TextIO | None = None,
    sep: str = " ",
) -> None:
    """Write visited values to `sink` (stdout by default). Action."""
    out = sink if sink is not None else sys.stdout
    for value in traverse(root, order):
        out.write(f"{value}{sep}")


def pre_order(root: Node | None, sink: TextIO | None = None, sep: str = " ") -> None:
    emit_traversal(root, TraversalOrder.PRE, sink, sep)


def in_order(root: Node | None, sink: TextIO | None = None, sep: str = " ") -> None:
    emit_traversal(root, TraversalOrder.IN, sink, sep)


def post_order(root: Node | None, sink: TextIO | None = None, sep: str = " ") -> None:
    emit_traversal(root, TraversalOrder.POST, sink, sep)


def read_tree(path: Path) -> Node | None:
    """Read a JSON tree description. Action."""
    return tree_from_dict(json.loads(path.read_text(encoding="utf-8")))


# =============================================================================
# MAIN (Orchestration) - Wiring only, single print at the end
# =============================================================================


def run(
    tree_path: Path | None,
    output_format: Literal["text", "json"],
) -> tuple[int, str]:
    """
    Summarize a tree. Returns (exit_code, output_to_display).

    Uses the built-in example tree unless `tree_path` is given.
    Only actual I/O is the optional file read.
    """
    if tree_path is None:
        root = build_example_tree()
    else:
        if not tree_path.exists():
            return (1, render_error(f"{tree_path} does not exist"))
        if not tree_path.is_file():
            return (1, render_error(f"{tree_path} is not a file"))
        try:
            # ACTION: Read
            root = read_tree(tree_path)
        except json.JSONDecodeError as e:
            return (1, render_error(f"{tree_path} is not valid JSON: {e.msg}"))
        except UnicodeDecodeError:
            return (1, render_error(f"{tree_path} is not valid JSON: not UTF-8 encoded"))
        except TreeFormatError as e:
            return (1, render_error(f"{tree_path}: {e}"))
        except RecursionError:
            return (1, render_error(f"{tree_path}: tree is nested too deeply"))
        except OSError as e:
            return (1, render_error(f"cannot read {tree_path}: {e.strerror}"))

    try:
        # COMPUTATION: Summarize (pure)
        summary = summarize(root)
    except RecursionError:
        return (1, render_error("tree is too deep to traverse"))

    # RENDER: Data -> str (pure)
    if output_format == "json":
        output = render_summary_json(summary)
    else:
        output = render_summary_text(summary)

    return (0, output)


def main() -> int:
    """Entry point. Parses args, calls run(), prints once, exits."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Traverse and count a binary tree (the built-in example by default)."
    )
    parser.add_argument(
        "--tree",
        type=Path,
        help="JSON file describing the tree as nested {value, left, right} objects",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    args = parser.parse_args()

    exit_code, output = run(tree_path=args.tree, output_format=args.format)

    # Single print at the edge
    print(output)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
