"""
Source locations for trace and debug attribution.

Locations are immutable values rendered in MLIR syntax. Rewrite rules tag the
location of a matched operation with the operator it came from, so that the
nodes they build can be traced back, e.g. ``loc("Tanh"("gelu/mul_1"))``.
"""

from dataclasses import dataclass
from typing import Tuple

import tensorflow.compat.v1 as tf

from .core import GraphView
from .kinds import Kind, canonical_name


class Location:
    def render(self) -> str:
        raise NotImplementedError()

    def __str__(self):
        return f"loc({self.render()})"


@dataclass(frozen=True)
class UnknownLoc(Location):
    def render(self) -> str:
        return "unknown"


@dataclass(frozen=True)
class FileLineColLoc(Location):
    filename: str
    line: int
    col: int = 0

    def render(self) -> str:
        return f'"{self.filename}":{self.line}:{self.col}'


@dataclass(frozen=True)
class NameLoc(Location):
    name: str
    child: Location = UnknownLoc()

    def render(self) -> str:
        if isinstance(self.child, UnknownLoc):
            return f'"{self.name}"'
        return f'"{self.name}"({self.child.render()})'


@dataclass(frozen=True)
class FusedLoc(Location):
    locations: Tuple[Location, ...]

    def render(self) -> str:
        return "fused[" + ", ".join(loc.render() for loc in self.locations) + "]"


def location_of(node: tf.NodeDef) -> Location:
    """Derives the base location of a node.

    Nodes carrying debug info are located at their original node names
    (``name@function`` when the original function is known); other nodes at
    their own name.
    """
    debug_info = node.experimental_debug_info
    names = list(debug_info.original_node_names)
    if not names:
        return NameLoc(node.name)

    funcs = list(debug_info.original_func_names)
    locs = []
    for i, name in enumerate(names):
        if i < len(funcs) and funcs[i]:
            name = f"{name}@{funcs[i]}"
        locs.append(NameLoc(name))
    if len(locs) == 1:
        return locs[0]
    return FusedLoc(tuple(locs))


def tag_location(kind: Kind, base: Location) -> Location:
    """Wraps ``base`` in a NameLoc carrying the canonical name of ``kind``."""
    return NameLoc(canonical_name(kind), base)


def tag_op_location(view: GraphView, op: tf.NodeDef) -> Location:
    """Tags the location of ``op`` with its own operator name."""
    return tag_location(view.kind_of(op), location_of(op))
