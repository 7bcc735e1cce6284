"""
Graph manipulation utility functions.

This module provides stateless helpers for reading, writing and indexing
GraphDefs by producer. They are shared by GraphView and by the test suite, which builds
small graphs node by node.
"""

import os
import numpy as np
from typing import Dict, List, Tuple

import tensorflow.compat.v1 as tf
from tensorflow.core.framework import node_def_pb2
from tensorflow.core.framework import types_pb2
from tensorflow.core.framework import attr_value_pb2
from tensorflow.python.framework import tensor_util
from google.protobuf import text_format


# =======================
# Graph I/O Operations
# =======================


def create_node(op, name, inputs=None, attr=None):
    """Creates a NodeDef proto."""
    node = node_def_pb2.NodeDef()
    node.op = op
    node.name = name
    if inputs:
        node.input.extend(inputs)
    if attr:
        for k, v in attr.items():
            node.attr[k].CopyFrom(v)
    return node


def create_const_node(name: str, value, dtype: str, shape: list = None):
    """Creates a Const NodeDef with given value, dtype and shape."""
    dtype_map = {
        "float16": types_pb2.DT_HALF,
        "float32": types_pb2.DT_FLOAT,
        "float64": types_pb2.DT_DOUBLE,
        "int32": types_pb2.DT_INT32,
        "int64": types_pb2.DT_INT64,
        "bool": types_pb2.DT_BOOL,
    }
    tf_dtype = dtype_map.get(dtype, types_pb2.DT_FLOAT)

    np_array = np.array(value, dtype=np.dtype(dtype))
    attr = attr_value_pb2.AttrValue()
    tensor = tensor_util.make_tensor_proto(np_array, dtype=tf_dtype, shape=shape)
    attr.tensor.CopyFrom(tensor)

    node = node_def_pb2.NodeDef()
    node.op = "Const"
    node.name = name
    dtype_attr = attr_value_pb2.AttrValue(type=tf_dtype)
    node.attr["dtype"].CopyFrom(dtype_attr)
    node.attr["value"].CopyFrom(attr)
    return node


def save_graph(graph_def, path):
    """Saves a GraphDef proto to a file (binary or pbtxt)."""
    output_dir = os.path.dirname(path)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir, exist_ok=True)

    if path.endswith(".pbtxt"):
        with open(path, "w") as f:
            f.write(text_format.MessageToString(graph_def))
    else:
        with open(path, "wb") as f:
            f.write(graph_def.SerializeToString())


def load_graph(path):
    """Loads a GraphDef proto from a file."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"Graph file not found: {path}")

    graph_def = tf.GraphDef()
    if path.endswith(".pbtxt"):
        with open(path, "r") as f:
            text_format.Merge(f.read(), graph_def)
    else:
        with open(path, "rb") as f:
            graph_def.ParseFromString(f.read())
    return graph_def


# =======================
# Graph Analysis Utilities
# =======================


def parse_tensor_name(input_name: str) -> Tuple[str, int, bool]:
    """
    Split a NodeDef input entry into (node_name, port, is_control).

    Args:
        input_name: Input name such as 'node', 'node:1' or '^node'

    Returns:
        Tuple of base node name, output port and control-dependency flag

    Raises:
        ValueError: If the entry has no node name or a non-integer port
    """
    is_control = input_name.startswith("^")
    body = input_name[1:] if is_control else input_name
    name, sep, port = body.partition(":")
    if not name:
        raise ValueError(f"Malformed tensor name: {input_name!r}")
    if not sep:
        return name, 0, is_control
    if is_control or not port.isdigit():
        raise ValueError(f"Malformed tensor name: {input_name!r}")
    return name, int(port), is_control


def data_inputs(node: tf.NodeDef) -> List[str]:
    """Returns the data (non-control) inputs of a node, in operand order."""
    return [i for i in node.input if not i.startswith("^")]


def build_producer_index(graph_def: tf.GraphDef, logger=None) -> Dict[str, tf.NodeDef]:
    """
    Build producer index from graph definition.

    Every output tensor 'name:k' is produced by the node called 'name', so the
    index is keyed by node name. Duplicate names break single assignment; the
    last definition wins and a warning is logged.

    Args:
        graph_def: The graph definition
        logger: Optional logger instance

    Returns:
        Dict mapping node names to their NodeDef
    """
    producers: Dict[str, tf.NodeDef] = {}
    for node in graph_def.node:
        if node.name in producers and logger:
            logger.warning(f"Duplicate node name in graph: {node.name}")
        producers[node.name] = node
    return producers
