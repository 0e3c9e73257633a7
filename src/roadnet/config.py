"""
Configuration for contraction hierarchy construction.

``ContractionConfig`` can be built directly or from a plain mapping (for example
parsed from a JSON file), in which case the mapping is checked against a JSON
schema first.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

from .core.exceptions import ConfigurationError

CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "parallel": {"type": "boolean"},
        "max_workers": {"type": ["integer", "null"], "minimum": 1},
        "edge_quotient_factor": {"type": "number", "exclusiveMinimum": 0},
        "max_memory_mb": {"type": ["number", "null"], "exclusiveMinimum": 0},
        "validate_shortcuts": {"type": "boolean"},
    },
    "additionalProperties": False,
}


@dataclass
class ContractionConfig:
    """
    Configuration for contraction hierarchy preprocessing.

    Attributes:
        parallel: Evaluate the per-node work of a round on a thread pool
        max_workers: Thread pool size, None for the executor default
        edge_quotient_factor: Weight of the edge quotient in node priorities
        max_memory_mb: Optional limit on memory growth, checked once per round
        validate_shortcuts: Check shortcut consistency after preprocessing
    """

    parallel: bool = True
    max_workers: Optional[int] = None
    edge_quotient_factor: float = 3.0
    max_memory_mb: Optional[float] = None
    validate_shortcuts: bool = False

    def __post_init__(self):
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError("max_workers must be a positive integer")
        if self.edge_quotient_factor <= 0:
            raise ConfigurationError("edge_quotient_factor must be positive")
        if self.max_memory_mb is not None and self.max_memory_mb <= 0:
            raise ConfigurationError("max_memory_mb must be positive")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ContractionConfig":
        """
        Create a configuration from a mapping.

        Args:
            data: Configuration values; omitted keys keep their defaults

        Returns:
            ContractionConfig instance

        Raises:
            ConfigurationError: If the mapping does not match the schema
        """
        try:
            json_validate(instance=dict(data), schema=CONFIG_SCHEMA)
        except JsonSchemaError as e:
            raise ConfigurationError(f"Invalid contraction config: {e.message}") from e
        values = dict(data)
        if values.get("max_memory_mb") is not None:
            values["max_memory_mb"] = float(values["max_memory_mb"])
        if "edge_quotient_factor" in values:
            values["edge_quotient_factor"] = float(values["edge_quotient_factor"])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
