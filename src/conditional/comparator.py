"""Comparator and staged comparisons.

A :class:`Comparator` is configured once. Each call to
:meth:`Comparator.compare` stages a value and returns an immutable
:class:`Comparison` carrying every registered predicate::

    compare = make_compare()
    compare(10).range(5, 15)         # True
    compare(10).not_.range(5, 15)    # False
    compare("john").in_("joe,john")  # True
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from functools import partial
from pathlib import Path
from typing import Any

from conditional.config import ComparatorConfig, ConfigValidator, load_config
from conditional.exceptions import ConfigValidationError, PredicateNotFoundError
from conditional.kernel import KernelProtocol, KernelType, default_kernel, get_kernel
from conditional.logging import configure_logging
from conditional.primitives.dates import normalize_date
from conditional.primitives.predicates import Predicate, instantiate_predicates
from conditional.primitives.values import UNDEFINED

__all__ = ["Comparator", "Comparison", "NegatedComparison", "make_compare"]

logger = logging.getLogger(__name__)


class _PredicateSurface:
    """Resolves predicate names to callables bound to a staged value."""

    __slots__ = ()

    def _lookup(self, name: str) -> Predicate | None:
        raise NotImplementedError

    def _bind(self, predicate: Predicate) -> Callable[..., bool]:
        raise NotImplementedError

    def __getattr__(self, name: str) -> Callable[..., bool]:
        if name.startswith("_"):
            raise AttributeError(name)
        predicate = self._lookup(name)
        if predicate is None:
            msg = f"{type(self).__name__!r} object has no predicate {name!r}"
            raise AttributeError(msg)
        return self._bind(predicate)

    def check(self, name: str, *args: Any) -> bool:
        """Evaluate a predicate by name.

        Raises:
            PredicateNotFoundError: If no predicate has that name.
        """
        predicate = self._lookup(name.lower())
        if predicate is None:
            raise PredicateNotFoundError(name)
        return self._bind(predicate)(*args)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)


class Comparison(_PredicateSurface):
    """An immutable staged value exposing every predicate."""

    __slots__ = ("_predicates", "_value")

    def __init__(self, value: Any, predicates: Mapping[str, Predicate]) -> None:
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_predicates", predicates)

    @property
    def value(self) -> Any:
        """The staged value, ISO-8601 strings already in epoch milliseconds."""
        return self._value

    @property
    def not_(self) -> NegatedComparison:
        """The same predicates, each returning its complement."""
        return NegatedComparison(self)

    def __getattr__(self, name: str) -> Any:
        if name == "not":
            return self.not_
        return super().__getattr__(name)

    def _lookup(self, name: str) -> Predicate | None:
        return self._predicates.get(name)

    def _bind(self, predicate: Predicate) -> Callable[..., bool]:
        return partial(predicate, self._value)

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self._predicates})

    def __repr__(self) -> str:
        return f"Comparison({self._value!r})"


class NegatedComparison(_PredicateSurface):
    """Negated view of a Comparison."""

    __slots__ = ("_comparison",)

    def __init__(self, comparison: Comparison) -> None:
        object.__setattr__(self, "_comparison", comparison)

    def _lookup(self, name: str) -> Predicate | None:
        return self._comparison._lookup(name)

    def _bind(self, predicate: Predicate) -> Callable[..., bool]:
        value = self._comparison.value

        def negated(*args: Any) -> bool:
            return not predicate(value, *args)

        return negated

    def __dir__(self) -> list[str]:
        return sorted({*super().__dir__(), *self._comparison._predicates})

    def __repr__(self) -> str:
        return f"NegatedComparison({self._comparison.value!r})"


class Comparator:
    """
    Stages comparison values.

    Args:
        config: A ComparatorConfig, a mapping of its fields (for example
            ``{"precision": True}``) or None for defaults.
        **options: Field overrides applied on top of ``config``.

    Raises:
        ConfigValidationError: If the resulting configuration is invalid.
    """

    def __init__(
        self,
        config: ComparatorConfig | Mapping[str, Any] | None = None,
        **options: Any,
    ) -> None:
        if config is None:
            config = ComparatorConfig()
        elif not isinstance(config, ComparatorConfig):
            config = ComparatorConfig.from_dict(dict(config))
        if options:
            config = config.replace(**options)

        is_valid, errors, _warnings = ConfigValidator().validate(config)
        if not is_valid:
            msg = "Invalid comparator configuration"
            raise ConfigValidationError(msg, errors=errors)

        self.config = config
        self.kernel: KernelProtocol
        if config.kernel_type == KernelType.PRECISION:
            self.kernel = get_kernel(
                KernelType.PRECISION, digits=config.precision_digits
            )
        else:
            self.kernel = default_kernel()
        self._predicates = instantiate_predicates(self.kernel)

    @classmethod
    def from_file(cls, path: str | Path) -> Comparator:
        """Create a comparator from a YAML or JSON configuration file.

        The file's ``logging`` section is applied to the ``conditional``
        logger.
        """
        config = load_config(path)
        configure_logging(config.logging)
        return cls(config)

    @property
    def precision(self) -> bool:
        return self.config.precision

    @property
    def predicates(self) -> list[str]:
        """Names (including aliases) of every available predicate."""
        return sorted(self._predicates)

    def compare(self, value: Any = UNDEFINED) -> Comparison:
        """Stage ``value`` and return its Comparison."""
        staged = normalize_date(value)
        if staged is not value:
            logger.debug("Staged ISO date %r as %d", value, staged)
        return Comparison(staged, self._predicates)

    def evaluate(self, value: Any = UNDEFINED) -> Comparison:
        """Alias of :meth:`compare`."""
        return self.compare(value)

    def condition(self, value: Any = UNDEFINED) -> Comparison:
        """Alias of :meth:`compare`."""
        return self.compare(value)

    def __repr__(self) -> str:
        return f"Comparator(kernel={self.kernel!r})"


def make_compare(
    config: ComparatorConfig | Mapping[str, Any] | None = None, **options: Any
) -> Callable[..., Comparison]:
    """Return the ``compare`` method of a fresh Comparator."""
    return Comparator(config, **options).compare
