from .graph_utils import (
    parse_tensor_name,
    data_inputs,
    build_producer_index,
    create_node,
    create_const_node,
    save_graph,
    load_graph,
)
from .logger import logger

__all__ = [
    # graph_utils
    "parse_tensor_name",
    "data_inputs",
    "build_producer_index",
    # I/O functions
    "create_node",
    "create_const_node",
    "save_graph",
    "load_graph",
    # logger
    "logger",
]
