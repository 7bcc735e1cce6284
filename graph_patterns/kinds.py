"""
Operation kind tags.

A kind is what matchers compare against ``NodeDef.op``. Three forms are
accepted wherever a kind is expected:

- an ``OpKind`` member or a plain op-type string (``"Tanh"``),
- the ``ANY`` wildcard, matching any produced value,
- a ``KindFamily`` built with ``family(...)``, matching any of its members.
"""

from enum import Enum
from typing import Union


# Wildcard op type, as used by OpPattern("*")
ANY = "*"


class OpKind(str, Enum):
    """TensorFlow op types the rewrite rules commonly ask about."""

    ADD = "Add"
    ADD_V2 = "AddV2"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    REAL_DIV = "RealDiv"
    NEG = "Neg"
    POW = "Pow"
    SQUARE = "Square"
    SQRT = "Sqrt"
    RSQRT = "Rsqrt"
    EXP = "Exp"
    LOG = "Log"
    ERF = "Erf"
    TANH = "Tanh"
    SIGMOID = "Sigmoid"
    RELU = "Relu"
    MAXIMUM = "Maximum"
    MINIMUM = "Minimum"
    MATMUL = "MatMul"
    BIAS_ADD = "BiasAdd"
    MEAN = "Mean"
    IDENTITY = "Identity"
    CONST = "Const"
    PLACEHOLDER = "Placeholder"

    def __str__(self):
        return self.value


class KindFamily(frozenset):
    """A set of op types treated as one kind (e.g. Add and AddV2)."""

    def __repr__(self):
        return f"family({', '.join(sorted(self))})"


Kind = Union[OpKind, str, KindFamily]


def kind_name(kind) -> str:
    """Returns the op-type string of a single kind."""
    if isinstance(kind, OpKind):
        return kind.value
    if isinstance(kind, str):
        return kind
    raise TypeError(f"Expected an op kind, got {type(kind).__name__}")


def family(*kinds) -> KindFamily:
    """Builds a KindFamily from OpKind members or op-type strings.

    The wildcard is not a family member; use ANY on its own instead.
    """
    if not kinds:
        raise ValueError("A kind family needs at least one member")
    names = KindFamily(kind_name(k) for k in kinds)
    if ANY in names:
        raise ValueError("The wildcard kind cannot be part of a family")
    return names


def kind_matches(kind: Kind, op_type: str) -> bool:
    if isinstance(kind, KindFamily):
        return op_type in kind
    name = kind_name(kind)
    return name == ANY or name == op_type


def canonical_name(kind: Kind) -> str:
    """Returns the registered op name of a kind.

    Only single, concrete kinds have a canonical name.
    """
    if isinstance(kind, KindFamily):
        raise ValueError(f"Kind family {kind!r} has no canonical name")
    name = kind_name(kind)
    if name == ANY:
        raise ValueError("The wildcard kind has no canonical name")
    return name


ADD_FAMILY = family(OpKind.ADD, OpKind.ADD_V2)
DIV_FAMILY = family(OpKind.DIV, OpKind.REAL_DIV)
