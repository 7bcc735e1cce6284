from .core import (
    GraphView,
    PreconditionError,
    Value,
)
from .config import MatchConfig, load_config
from .kinds import (
    ANY,
    OpKind,
    KindFamily,
    family,
    canonical_name,
    ADD_FAMILY,
    DIV_FAMILY,
)
from .constants import (
    is_dense_constant,
    is_constant_equal_to,
    is_absent_value,
)
from .matchers import (
    PairMatch,
    OperandMatch,
    BinaryOperandMatch,
    ProducerMatch,
    is_produced_by,
    match_pair,
    match_operand_at,
    match_operand_at_binary,
    match_const_and_op,
    match_value_and_op,
)
from .location import (
    Location,
    UnknownLoc,
    FileLineColLoc,
    NameLoc,
    FusedLoc,
    location_of,
    tag_location,
    tag_op_location,
)
from .utils.logger import set_log_level, DEBUG, INFO, WARNING, ERROR

__all__ = [
    "GraphView",
    "PreconditionError",
    "Value",
    "MatchConfig",
    "load_config",
    "ANY",
    "OpKind",
    "KindFamily",
    "family",
    "canonical_name",
    "ADD_FAMILY",
    "DIV_FAMILY",
    "is_dense_constant",
    "is_constant_equal_to",
    "is_absent_value",
    "PairMatch",
    "OperandMatch",
    "BinaryOperandMatch",
    "ProducerMatch",
    "is_produced_by",
    "match_pair",
    "match_operand_at",
    "match_operand_at_binary",
    "match_const_and_op",
    "match_value_and_op",
    "Location",
    "UnknownLoc",
    "FileLineColLoc",
    "NameLoc",
    "FusedLoc",
    "location_of",
    "tag_location",
    "tag_op_location",
    "set_log_level",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
]
