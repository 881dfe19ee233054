"""Kernel type names and construction from configuration dicts."""

import logging
from typing import Any, Callable, Dict, List, Type

from .base import DirectKernel

logger = logging.getLogger(__name__)

_KERNEL_TYPES: Dict[str, Type[DirectKernel]] = {}


def register_kernel(name: str) -> Callable[[Type[DirectKernel]], Type[DirectKernel]]:
    """
    Class decorator binding a kernel class to the type name ``name``.
    
    The name is what ``to_config`` emits and ``KernelFactory`` accepts.
    It is not inherited: a subclass must be registered on its own.
    
    Parameters:
        name: Type name used in configuration dicts
    """
    def decorator(cls: Type[DirectKernel]) -> Type[DirectKernel]:
        previous = _KERNEL_TYPES.get(name)
        if previous is not None and previous is not cls:
            logger.warning(f"Kernel type {name!r} rebound from {previous.__name__} to {cls.__name__}")
        _KERNEL_TYPES[name] = cls
        cls.kernel_type = name
        logger.debug(f"Kernel type {name!r} -> {cls.__name__}")
        return cls
    return decorator


def get_registered_kernels() -> List[str]:
    """Type names accepted by ``KernelFactory``."""
    return sorted(_KERNEL_TYPES)


class KernelFactory:
    """
    Builds kernels from a type name or a configuration dict.
    
    Example usage:
    
        kernel = KernelFactory.from_config({"type": "linear", "representation": "bow"})
        same = KernelFactory.create("linear", representation="bow")
        assert KernelFactory.from_config(kernel.to_config()) == kernel
    """
    
    @classmethod
    def create(cls, kernel_type: str, **kwargs) -> DirectKernel:
        """
        Instantiate the kernel registered as ``kernel_type``.
        
        Parameters:
            kernel_type: Registered type name (e.g. "linear")
            **kwargs: Constructor arguments of the kernel
        
        Returns:
            New kernel instance
        """
        try:
            kernel_cls = _KERNEL_TYPES[kernel_type]
        except KeyError:
            known = ", ".join(get_registered_kernels()) or "none"
            raise ValueError(
                f"Unknown kernel type {kernel_type!r} (known: {known})"
            ) from None
        return kernel_cls(**kwargs)
    
    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> DirectKernel:
        """
        Instantiate a kernel from a dict as produced by ``to_config``.
        
        Parameters:
            config: "type" key plus constructor arguments
        
        Returns:
            New kernel instance
        """
        if "type" not in config:
            raise ValueError("Kernel config must have a 'type' key")
        kwargs = {k: v for k, v in config.items() if k != "type"}
        return cls.create(config["type"], **kwargs)
