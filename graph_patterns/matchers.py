"""
Pattern matchers for rewrite rules.

Every matcher is a pure, one-hop query against a GraphView: it looks at the
producer of a value (or of an operand) and compares its kind. Commutative
patterns are handled by testing both operand orders; the graph is never
touched.

Failed matches are ordinary results, not errors. A result is falsy when it
did not match, and its remaining fields are then None:

    m = match_const_and_op(view, x, y, 0.5, OpKind.TANH)
    if m:
        tanh = m.producer
"""

import tensorflow.compat.v1 as tf
from typing import NamedTuple, Optional

from .constants import is_constant_equal_to
from .core import GraphView, Value, ValueLike, as_value
from .kinds import Kind, kind_matches
from .utils.logger import log_match


def _describe(field):
    if isinstance(field, tf.NodeDef):
        return f"{field.name}<{field.op}>"
    if isinstance(field, Value):
        return str(field)
    return repr(field)


def _match_repr(self):
    fields = ", ".join(f"{name}={_describe(getattr(self, name))}" for name in self._fields)
    return f"{type(self).__name__}({fields})"


class PairMatch(NamedTuple):
    """``a`` is always the value produced by the first requested kind."""

    matched: bool
    a: Optional[Value] = None
    b: Optional[Value] = None

    def __bool__(self):
        return self.matched

    __repr__ = _match_repr


class OperandMatch(NamedTuple):
    matched: bool
    producer: Optional[tf.NodeDef] = None
    operand: Optional[Value] = None

    def __bool__(self):
        return self.matched

    __repr__ = _match_repr


class BinaryOperandMatch(NamedTuple):
    matched: bool
    producer: Optional[tf.NodeDef] = None
    operand0: Optional[Value] = None
    operand1: Optional[Value] = None

    def __bool__(self):
        return self.matched

    __repr__ = _match_repr


class ProducerMatch(NamedTuple):
    matched: bool
    producer: Optional[tf.NodeDef] = None

    def __bool__(self):
        return self.matched

    __repr__ = _match_repr


def is_produced_by(view: GraphView, kind: Kind, value: ValueLike) -> bool:
    """True iff ``value`` has a producer and that producer is of ``kind``.

    Graph inputs never match, not even the ANY wildcard.
    """
    producer = view.producer(value)
    return producer is not None and kind_matches(kind, view.kind_of(producer))


@log_match
def match_pair(
    view: GraphView, kind_a: Kind, kind_b: Kind, a: ValueLike, b: ValueLike
) -> PairMatch:
    """Matches two operands against two kinds in either order.

    On success the result is reordered so that ``result.a`` was produced by
    ``kind_a`` and ``result.b`` by ``kind_b``.
    """
    a, b = as_value(a), as_value(b)
    if is_produced_by(view, kind_a, a) and is_produced_by(view, kind_b, b):
        return PairMatch(True, a, b)
    if is_produced_by(view, kind_b, a) and is_produced_by(view, kind_a, b):
        return PairMatch(True, b, a)
    return PairMatch(False)


@log_match
def match_operand_at(view: GraphView, op: tf.NodeDef, index: int, kind: Kind) -> OperandMatch:
    """Matches the producer of ``op``'s operand ``index`` against ``kind``.

    Raises:
        PreconditionError: If ``index`` is outside ``[0, arity(op))``.
    """
    operand = view.operand_at(op, index)
    producer = view.producer(operand)
    if producer is None or not kind_matches(kind, view.kind_of(producer)):
        return OperandMatch(False)
    return OperandMatch(True, producer, operand)


@log_match
def match_operand_at_binary(
    view: GraphView, op: tf.NodeDef, index: int, kind: Kind
) -> BinaryOperandMatch:
    """Binary form of match_operand_at.

    The decision is made on operand ``index`` alone. On success the result
    carries ``op``'s operands 0 and 1, whichever index was tested, so this is
    only meaningful for two-operand operations.
    """
    match = match_operand_at(view, op, index, kind)
    if not match:
        return BinaryOperandMatch(False)
    return BinaryOperandMatch(
        True, match.producer, view.operand_at(op, 0), view.operand_at(op, 1)
    )


@log_match
def match_const_and_op(
    view: GraphView, a: ValueLike, b: ValueLike, constant: float, kind: Kind
) -> ProducerMatch:
    """Matches ``const(constant) (+) kind(...)`` for a commutative op (+).

    ``a`` is tried as the constant first; the first ordering that holds wins.
    """
    if is_constant_equal_to(view, a, constant) and is_produced_by(view, kind, b):
        return ProducerMatch(True, view.producer(b))
    if is_constant_equal_to(view, b, constant) and is_produced_by(view, kind, a):
        return ProducerMatch(True, view.producer(a))
    return ProducerMatch(False)


@log_match
def match_value_and_op(
    view: GraphView, a: ValueLike, b: ValueLike, target: ValueLike, kind: Kind
) -> ProducerMatch:
    """Like match_const_and_op, but one side must be exactly ``target``."""
    a, b, target = as_value(a), as_value(b), as_value(target)
    if a == target and is_produced_by(view, kind, b):
        return ProducerMatch(True, view.producer(b))
    if b == target and is_produced_by(view, kind, a):
        return ProducerMatch(True, view.producer(a))
    return ProducerMatch(False)
