"""Protocol implemented by every comparison kernel."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["KernelProtocol"]


@runtime_checkable
class KernelProtocol(Protocol):
    """
    Primitive relational and equality operations used by predicates.

    Kernels receive operands after ISO-date normalisation. They must return
    a bool for any operands, including values that cannot be ordered.
    """

    name: str

    def gt(self, left: Any, right: Any) -> bool:
        """left > right"""
        ...

    def lt(self, left: Any, right: Any) -> bool:
        """left < right"""
        ...

    def ge(self, left: Any, right: Any) -> bool:
        """left >= right"""
        ...

    def le(self, left: Any, right: Any) -> bool:
        """left <= right"""
        ...

    def eq(self, left: Any, right: Any) -> bool:
        """Strict equality."""
        ...
