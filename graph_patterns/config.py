import json
import os
from typing import Any, Dict, Iterable, Optional

from .utils.logger import DEBUG, INFO, WARNING, ERROR, set_log_level

DEFAULT_INPUT_OPS = ("Placeholder", "_Arg")
DEFAULT_CONSTANT_OPS = ("Const", "HostConst")


class MatchConfig:
    """
    Tunables of the matching layer.

    Attributes:
        input_ops: Op types whose outputs are graph inputs (no producer).
        constant_ops: Op types whose outputs may be dense constants.
        log_level: Level applied to the package logger by GraphView.
    """

    _KEYS = ("input_ops", "constant_ops", "log_level")

    def __init__(
        self,
        input_ops: Optional[Iterable[str]] = None,
        constant_ops: Optional[Iterable[str]] = None,
        log_level: int = INFO,
        config: Optional[Dict[str, Any]] = None,
    ):
        self.input_ops = frozenset(input_ops if input_ops is not None else DEFAULT_INPUT_OPS)
        self.constant_ops = frozenset(
            constant_ops if constant_ops is not None else DEFAULT_CONSTANT_OPS
        )
        self.log_level = log_level

        # Apply config overrides if provided
        if config:
            self._apply_config(config)

    def _apply_config(self, config):
        """Merges configuration dict into instance attributes."""
        unknown = set(config) - set(self._KEYS)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        if "input_ops" in config:
            self.input_ops = frozenset(config["input_ops"])
        if "constant_ops" in config:
            self.constant_ops = frozenset(config["constant_ops"])
        if "log_level" in config:
            level = config["log_level"]
            # JSON files carry level names
            if isinstance(level, str):
                if level.upper() not in _LEVEL_NAMES:
                    raise ValueError(f"Unknown log level: {level}")
                level = _LEVEL_NAMES[level.upper()]
            self.log_level = level

    def apply_logging(self):
        set_log_level(self.log_level)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "input_ops": sorted(self.input_ops),
            "constant_ops": sorted(self.constant_ops),
            "log_level": self.log_level,
        }

    def __repr__(self):
        return f"MatchConfig({self.to_dict()})"


_LEVEL_NAMES = {"DEBUG": DEBUG, "INFO": INFO, "WARNING": WARNING, "ERROR": ERROR}


def load_config(path: str) -> MatchConfig:
    """Loads a MatchConfig from a JSON file.

    Config file format (JSON):
      {
        "input_ops": ["Placeholder", "_Arg"],
        "constant_ops": ["Const"],
        "log_level": "DEBUG"
      }
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r") as f:
        data = json.load(f)
    return MatchConfig(config=data)
