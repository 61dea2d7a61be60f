"""
Pluggable comparison kernels for conditional.

A kernel implements the primitive relational and equality operations that
predicates build on. Swapping the kernel changes how numbers compare
without touching predicate logic.

Usage:
    from conditional.kernel import get_kernel, KernelType

    kernel = get_kernel()                       # native operators
    kernel = get_kernel(KernelType.PRECISION)   # exact decimals
    kernel = get_kernel("precision", digits=120)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from conditional.exceptions import KernelError
from conditional.kernel.native_kernel import NativeKernel
from conditional.kernel.precision_kernel import DEFAULT_DIGITS, PrecisionKernel
from conditional.kernel.protocol import KernelProtocol

__all__ = [
    "DEFAULT_DIGITS",
    "KernelProtocol",
    "KernelType",
    "NativeKernel",
    "PrecisionKernel",
    "default_kernel",
    "get_kernel",
    "reset_default_kernel",
    "set_default_kernel",
]

logger = logging.getLogger(__name__)


class KernelType(Enum):
    """Available kernel implementations."""

    NATIVE = "native"
    PRECISION = "precision"


def get_kernel(
    kernel_type: KernelType | str = KernelType.NATIVE, **options: Any
) -> KernelProtocol:
    """
    Get a kernel implementation.

    Args:
        kernel_type: Which kernel to use. Can be KernelType enum or string.
        **options: Passed to the kernel constructor (``digits`` for the
            precision kernel).

    Returns:
        Kernel implementation instance.

    Raises:
        KernelError: If an invalid kernel type is specified.
    """
    if isinstance(kernel_type, str):
        try:
            kernel_type = KernelType(kernel_type.lower())
        except ValueError:
            valid = ", ".join(k.value for k in KernelType)
            msg = f"Invalid kernel_type: {kernel_type}. Valid: {valid}"
            raise KernelError(msg, context={"kernel_type": kernel_type}) from None

    if kernel_type == KernelType.PRECISION:
        kernel: KernelProtocol = PrecisionKernel(**options)
    else:
        kernel = NativeKernel()
    logger.debug("Using %r", kernel)
    return kernel


# Default kernel singleton
_default_kernel: KernelProtocol | None = None


def default_kernel() -> KernelProtocol:
    """Get the default (native) kernel, created on first use."""
    global _default_kernel
    if _default_kernel is None:
        _default_kernel = get_kernel()
    return _default_kernel


def set_default_kernel(kernel: KernelProtocol) -> None:
    """Replace the default kernel."""
    global _default_kernel
    _default_kernel = kernel


def reset_default_kernel() -> None:
    """Reset the default kernel singleton (useful for testing)."""
    global _default_kernel
    _default_kernel = None
