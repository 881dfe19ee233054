"""Kernel implementations for kervec."""

from .base import Kernel, DirectKernel
from .factory import KernelFactory, register_kernel, get_registered_kernels
from .linear import LinearKernel

__all__ = [
    "Kernel",
    "DirectKernel",
    "KernelFactory",
    "register_kernel",
    "get_registered_kernels",
    "LinearKernel",
]
