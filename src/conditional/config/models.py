"""Configuration data models."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any

from conditional.kernel import DEFAULT_DIGITS, KernelType

__all__ = ["ComparatorConfig", "LoggingConfig"]


@dataclass
class LoggingConfig:
    """Where and how conditional logs."""

    level: str = "WARNING"
    format: str = "text"  # text|json|compact

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LoggingConfig:
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})


@dataclass
class ComparatorConfig:
    """Options fixed when a Comparator is constructed."""

    precision: bool = False
    precision_digits: int = DEFAULT_DIGITS
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def kernel_type(self) -> KernelType:
        return KernelType.PRECISION if self.precision else KernelType.NATIVE

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ComparatorConfig:
        """Build a config from a mapping, ignoring unknown keys."""
        logging_data = data.get("logging") or {}
        return cls(
            precision=data.get("precision", False),
            precision_digits=data.get("precision_digits", DEFAULT_DIGITS),
            logging=(
                logging_data
                if isinstance(logging_data, LoggingConfig)
                else LoggingConfig.from_dict(logging_data)
            ),
        )

    def replace(self, **overrides: Any) -> ComparatorConfig:
        """Return a copy with ``overrides`` applied.

        Raises:
            TypeError: If an override does not name a field.
        """
        return replace(self, **overrides)
