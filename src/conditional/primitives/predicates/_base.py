"""Base class and registry for predicates."""

from __future__ import annotations

import inspect
from typing import TYPE_CHECKING, Any

from conditional.exceptions import PredicateNotFoundError
from conditional.logging.error_logger import log_predicate_error

if TYPE_CHECKING:
    from conditional.kernel.protocol import KernelProtocol

PREDICATES: dict[str, type[Predicate]] = {}

# Failures a comparison may hit on exotic operands. They never escape a
# predicate: the predicate logs them and answers False.
COMPARISON_ERRORS = (TypeError, ValueError, ArithmeticError)


class Predicate:
    """Base class for predicates evaluated against a staged value."""

    name: str = ""

    def __init__(self, kernel: KernelProtocol) -> None:
        self.kernel = kernel
        self._signature = inspect.signature(self.evaluate)

    def __call__(self, staged: Any, *args: Any) -> bool:
        # A wrong argument count is a caller error and raises TypeError.
        self._signature.bind(staged, *args)
        try:
            return bool(self.evaluate(staged, *args))
        except COMPARISON_ERRORS as e:
            log_predicate_error(self.name, e, staged, args, kernel=self.kernel.name)
            return False

    def evaluate(self, staged: Any, *args: Any) -> bool:
        """Evaluate the predicate against the staged value."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kernel={self.kernel!r})"


def register_predicate(name: str):
    """Register a predicate class by name."""

    def decorator(predicate_cls: type[Predicate]) -> type[Predicate]:
        PREDICATES[name.lower()] = predicate_cls
        return predicate_cls

    return decorator


def get_predicate(name: str) -> type[Predicate]:
    """Get a predicate class by name."""
    try:
        return PREDICATES[name.lower()]
    except KeyError:
        raise PredicateNotFoundError(name) from None


def instantiate_predicates(kernel: KernelProtocol) -> dict[str, Predicate]:
    """Create one instance per predicate class, shared by all its aliases."""
    instances: dict[type[Predicate], Predicate] = {}
    table: dict[str, Predicate] = {}
    for name, predicate_cls in PREDICATES.items():
        if predicate_cls not in instances:
            instances[predicate_cls] = predicate_cls(kernel)
        table[name] = instances[predicate_cls]
    return table
