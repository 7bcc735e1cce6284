import tensorflow.compat.v1 as tf
from typing import Dict, NamedTuple, Optional, Set, Tuple, Union

from .config import MatchConfig
from .utils.graph_utils import (
    build_producer_index,
    data_inputs,
    load_graph,
    parse_tensor_name,
)
from .utils.logger import logger as logging, log_indexing


class PreconditionError(AssertionError):
    """Raised when a matcher is called in a way no well-formed rewrite rule
    would call it (e.g. an operand index beyond the operation's arity).

    This is a bug in the calling rule, not a property of the graph, so it
    is never converted into a failed match.
    """


class Value(NamedTuple):
    """A single-assignment tensor: output ``port`` of the node ``name``."""

    name: str
    port: int = 0

    @classmethod
    def parse(cls, tensor_name: str) -> "Value":
        """Parses 'node' or 'node:port'. Control inputs are not values."""
        name, port, is_control = parse_tensor_name(tensor_name)
        if is_control:
            raise ValueError(f"Control input is not a value: {tensor_name!r}")
        return cls(name, port)

    def __str__(self):
        return self.name if self.port == 0 else f"{self.name}:{self.port}"


ValueLike = Union[Value, str]


def as_value(value: ValueLike) -> Value:
    if isinstance(value, Value):
        return value
    return Value.parse(value)


class GraphView:
    """
    Read-only query surface over a TensorFlow GraphDef.

    The view indexes the graph once (producers and data operands per node)
    and never modifies it afterwards. Matchers only ask it one-hop
    questions, so every query is a dictionary lookup.

    A value has no producer (it is a graph input) when its node is missing
    from the graph or is one of ``config.input_ops``.

    Passing a ``config`` applies its ``log_level`` to the process-wide
    ``GraphPatterns`` logger, like ``set_log_level``. Without a config the
    logger level is left as it is.
    """

    @log_indexing
    def __init__(self, graph_def: tf.GraphDef, config: Optional[MatchConfig] = None):
        if config is not None:
            config.apply_logging()
        self.config = config or MatchConfig()
        self.graph_def = graph_def
        self.nodes: Dict[str, tf.NodeDef] = build_producer_index(graph_def, logging)
        self._operands: Dict[str, Tuple[Value, ...]] = {
            name: tuple(Value.parse(i) for i in data_inputs(node))
            for name, node in self.nodes.items()
        }
        self.graph_inputs: Set[str] = {
            name
            for name, node in self.nodes.items()
            if node.op in self.config.input_ops
        }

    @classmethod
    def from_file(cls, path: str, config: Optional[MatchConfig] = None) -> "GraphView":
        """Loads a .pb / .pbtxt GraphDef and indexes it."""
        return cls(load_graph(path), config)

    def node(self, name: str) -> Optional[tf.NodeDef]:
        return self.nodes.get(name)

    def kind_of(self, op: tf.NodeDef) -> str:
        return op.op

    def operands(self, op: tf.NodeDef) -> Tuple[Value, ...]:
        """Returns the data operands of an operation, control inputs excluded."""
        if op.name not in self._operands:
            raise PreconditionError(f"Operation {op.name!r} is not part of this graph")
        return self._operands[op.name]

    def arity(self, op: tf.NodeDef) -> int:
        return len(self.operands(op))

    def operand_at(self, op: tf.NodeDef, index: int) -> Value:
        operands = self.operands(op)
        if not 0 <= index < len(operands):
            logging.error(
                f"Operand index {index} out of range for {op.name} "
                f"(Op: {op.op}, arity {len(operands)})"
            )
            raise PreconditionError(
                f"Operand index {index} out of range for {op.name!r} with arity {len(operands)}"
            )
        return operands[index]

    def producer(self, value: ValueLike) -> Optional[tf.NodeDef]:
        """Returns the operation defining ``value``, or None for graph inputs."""
        name = as_value(value).name
        if name in self.graph_inputs:
            return None
        return self.nodes.get(name)

    def is_graph_input(self, value: ValueLike) -> bool:
        return self.producer(value) is None

    def output(self, op: tf.NodeDef, port: int = 0) -> Value:
        return Value(op.name, port)
