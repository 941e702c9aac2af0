# shrinkcheck/shrink_tree.py
"""
shrinkcheck/shrink_tree.py
==========================

Materialise, walk and render the shrink tree of a generated value.

Built only on the public ``Arbitrary.shrink`` step, this is the tool used to
inspect and test shrinking behaviour:

* ``build_shrink_tree`` – iterative construction under a global node budget
* ``walk_tree``         – pre-order depth-first traversal
* ``render_tree``       – indented text diagram

Example::

    tree = shrink_tree_of(integer(0, 10), Random(seed), max_nodes=20)
    print("\\n".join(render_tree(tree)))

which, for a generated 8, prints::

    8
    ├> 0
    ├> 4
    |  ├> 2
    |  |  └> 1
    |  └> 3
    ├> 6
    |  └> 5
    └> 7
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterator, List, Optional, Tuple, TypeVar, Union

from shrinkcheck.arbitrary import Arbitrary
from shrinkcheck.rng import Random
from shrinkcheck.shrinkable import NextValue

__all__ = [
    "TRUNCATED",
    "NodeBudget",
    "ShrinkTree",
    "build_shrink_tree",
    "shrink_tree_of",
    "walk_tree",
    "render_tree",
    "count_nodes",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _Truncated:
    """Marker standing for a subtree cut off by the node budget."""

    def __repr__(self) -> str:
        return "TRUNCATED"


TRUNCATED = _Truncated()


@dataclass
class NodeBudget:
    """Number of nodes a tree construction may still materialise.

    One budget is shared by the whole construction, so it bounds the total size
    of the tree rather than the size of each branch.
    """
    remaining: float = math.inf

    def consume(self) -> None:
        self.remaining -= 1

    @property
    def exhausted(self) -> bool:
        return self.remaining <= 0


@dataclass
class ShrinkTree(Generic[T]):
    """A value and the trees of its shrinks, in shrink order."""
    value: Union[T, _Truncated]
    children: List["ShrinkTree[T]"] = field(default_factory=list)

    @property
    def is_truncated(self) -> bool:
        return self.value is TRUNCATED


def build_shrink_tree(
    arbitrary: Arbitrary[T],
    next_value: NextValue[T],
    budget: Optional[NodeBudget] = None,
) -> ShrinkTree[T]:
    """Expand *next_value* into its full shrink tree.

    Once *budget* is exhausted, the remaining siblings at the current level
    are replaced by a single ``TRUNCATED`` leaf.  Without a budget the
    construction only terminates for finite trees.

    Expansion runs on an explicit stack of open nodes, so the depth of the
    tree is bounded by the budget only and not by the interpreter's
    recursion limit.
    """
    if budget is None:
        budget = NodeBudget()
    budget.consume()
    root: ShrinkTree[T] = ShrinkTree(next_value.value)
    stack: List[Tuple[ShrinkTree[T], Iterator[NextValue[T]]]] = [
        (root, iter(arbitrary.shrink(next_value.value, next_value.context)))
    ]
    while stack:
        node, candidates = stack[-1]
        candidate = next(candidates, None)
        if candidate is None:
            stack.pop()
            continue
        if budget.exhausted:
            logger.debug("shrink tree truncated below %r", node.value)
            node.children.append(ShrinkTree(TRUNCATED))
            stack.pop()
            continue
        budget.consume()
        child: ShrinkTree[T] = ShrinkTree(candidate.value)
        node.children.append(child)
        stack.append((child, iter(arbitrary.shrink(candidate.value, candidate.context))))
    return root


def shrink_tree_of(
    arbitrary: Arbitrary[T],
    random: Random,
    max_nodes: Optional[int] = None,
) -> ShrinkTree[T]:
    """Generate one value from *arbitrary* and build its shrink tree."""
    budget = NodeBudget() if max_nodes is None else NodeBudget(max_nodes)
    root = arbitrary.generate(random).to_next_value()
    return build_shrink_tree(arbitrary, root, budget)


def walk_tree(tree: ShrinkTree[T], visit: Callable[[T], Any]) -> None:
    """Call *visit* on every value of *tree*, parents before children.

    Truncation markers are skipped.
    """
    stack = [tree]
    while stack:
        node = stack.pop()
        if not node.is_truncated:
            visit(node.value)  # type: ignore[arg-type]
        stack.extend(reversed(node.children))


def render_tree(tree: ShrinkTree[T], stringify: Callable[[Any], str] = repr) -> List[str]:
    """Render *tree* as lines of text, one node per line."""
    lines: List[str] = []
    # (node, indent inherited from the ancestors, connector to the parent)
    stack: List[Tuple[ShrinkTree[T], str, str]] = [(tree, "", "")]
    while stack:
        node, indent, connector = stack.pop()
        label = "…" if node.is_truncated else stringify(node.value)
        lines.append(indent + connector + label)
        if connector == "├> ":
            indent += "|  "
        elif connector == "└> ":
            indent += "   "
        last = len(node.children) - 1
        for index in range(last, -1, -1):
            stack.append((node.children[index], indent, "└> " if index == last else "├> "))
    return lines


def count_nodes(tree: ShrinkTree[Any]) -> int:
    """Number of nodes of *tree*, truncation markers excluded."""
    count = 0
    stack = [tree]
    while stack:
        node = stack.pop()
        if not node.is_truncated:
            count += 1
        stack.extend(node.children)
    return count
