"""Configuration validation."""

from __future__ import annotations

import logging

from .models import ComparatorConfig

__all__ = ["ConfigValidator"]

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_LOG_FORMATS = {"text", "json", "compact"}

# Digits needed to hold any float's shortest repr exactly.
FLOAT_REPR_DIGITS = 17


class ConfigValidator:
    """Collects errors and warnings for a ComparatorConfig."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []

    def validate(self, config: ComparatorConfig) -> tuple[bool, list[str], list[str]]:
        """
        Validate a configuration.

        Returns:
            Tuple of (is_valid, errors, warnings).
        """
        self.errors = []
        self.warnings = []

        self._validate_precision(config)
        self._validate_logging(config)

        for warning in self.warnings:
            logging.getLogger(__name__).warning("Configuration warning: %s", warning)
        return not self.errors, list(self.errors), list(self.warnings)

    def _validate_precision(self, config: ComparatorConfig) -> None:
        if not isinstance(config.precision, bool):
            self.errors.append(
                f"precision must be a boolean, got {config.precision!r}"
            )
        digits = config.precision_digits
        if isinstance(digits, bool) or not isinstance(digits, int):
            self.errors.append(f"precision_digits must be an integer, got {digits!r}")
            return
        if digits < 1:
            self.errors.append(f"precision_digits must be positive, got {digits}")
        elif config.precision and digits < FLOAT_REPR_DIGITS:
            self.warnings.append(
                f"precision_digits={digits} cannot represent every float exactly "
                f"(need {FLOAT_REPR_DIGITS})"
            )

    def _validate_logging(self, config: ComparatorConfig) -> None:
        level = str(config.logging.level).upper()
        if level not in VALID_LOG_LEVELS:
            self.errors.append(f"Invalid log level: {config.logging.level}")
        if config.logging.format not in VALID_LOG_FORMATS:
            self.errors.append(f"Invalid log format: {config.logging.format}")
