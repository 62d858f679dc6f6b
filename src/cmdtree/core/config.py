"""
Configuration for command parsing and registration behavior.
"""

from dataclasses import dataclass


@dataclass
class ParserConfig:
    """Configuration for registry and binder behavior."""

    allow_duplicate_paths: bool = False  # First-registered definition wins when True
    integer_bits: int = 64  # Width used for INTEGER / UNSIGNED range checks
    flag_value: str = "true"  # Raw value given to bare flags

    def __post_init__(self):
        if self.integer_bits <= 0:
            raise ValueError(
                f"integer_bits must be positive, got {self.integer_bits}"
            )

    @classmethod
    def from_dict(cls, config: dict | None = None) -> "ParserConfig":
        """Factory method to create config from dict with defaults."""
        if config is None:
            config = {}
        return cls(**config)

    @property
    def int_min(self) -> int:
        return -(1 << (self.integer_bits - 1))

    @property
    def int_max(self) -> int:
        return (1 << (self.integer_bits - 1)) - 1

    @property
    def uint_max(self) -> int:
        return (1 << self.integer_bits) - 1
