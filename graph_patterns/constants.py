"""
Constant recognition.

Answers "is this value a dense constant" and "does its payload equal a given
scalar" for rewrite rules. Nothing here folds or builds constants.
"""

import numpy as np
from typing import Optional
from tensorflow.python.framework import tensor_util

from .core import GraphView, Value, ValueLike, as_value


def constant_array(view: GraphView, value: ValueLike) -> Optional[np.ndarray]:
    """Returns the payload of a dense constant, or None if ``value`` is not one.

    Dense means the producer is a constant op with a non-empty tensor
    ``value`` attribute. Splat-encoded tensors are expanded.
    """
    value = as_value(value)
    producer = view.producer(value)
    if producer is None or producer.op not in view.config.constant_ops:
        return None
    # Constant ops have a single output
    if value.port != 0:
        return None
    if "value" not in producer.attr:
        return None
    attr = producer.attr["value"]
    if attr.WhichOneof("value") != "tensor":
        return None
    array = tensor_util.MakeNdarray(attr.tensor)
    if array.size == 0:
        return None
    return array


def is_dense_constant(view: GraphView, value: ValueLike) -> bool:
    return constant_array(view, value) is not None


def is_constant_equal_to(view: GraphView, value: ValueLike, scalar: float) -> bool:
    """True iff ``value`` is a dense constant whose every element equals ``scalar``.

    The scalar is converted to the constant's dtype before comparing, so a
    float32 constant built from 0.1 equals 0.1. The conversion must not
    change what the scalar denotes: the converted value has to equal the
    scalar exactly or through its shortest decimal form. A zero constant
    therefore never equals 1e-50, nor a float16 1.0 equal 1.0002. Integer
    and boolean constants never equal a scalar their dtype cannot represent
    exactly.
    """
    array = constant_array(view, value)
    if array is None:
        return False

    kind = array.dtype.kind
    if kind not in "biufc":
        return False
    if kind in "biu":
        if not float(scalar).is_integer():
            return False
        if kind == "b":
            if scalar not in (0, 1):
                return False
        else:
            info = np.iinfo(array.dtype)
            if not info.min <= scalar <= info.max:
                return False

    if kind == "f" and not _represents(array.dtype, scalar):
        return False

    with np.errstate(over="ignore"):
        target = np.asarray(scalar, dtype=array.dtype)
    return bool(np.all(np.equal(array, target)))


def _represents(dtype: np.dtype, scalar: float) -> bool:
    """True iff casting ``scalar`` to the float ``dtype`` keeps its value.

    Underflow to zero, overflow to inf and rounding onto a neighbouring
    value all fail this check.
    """
    with np.errstate(over="ignore"):
        cast = dtype.type(scalar)
    if float(cast) == scalar:
        return True
    return float(np.format_float_scientific(cast, unique=True)) == scalar


def is_absent_value(value) -> bool:
    """True for the "no value" placeholder: None or an empty tensor name."""
    if value is None:
        return True
    if isinstance(value, Value):
        return not value.name
    return value == ""
