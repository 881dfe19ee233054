"""Base kernel protocol and the single-representation kernel base class."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Protocol, Sequence, runtime_checkable

import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float

from ..exceptions import MissingRepresentationError


@runtime_checkable
class Kernel(Protocol):
    """Protocol for kernel functions on examples."""
    
    def compute(self, example_a: Any, example_b: Any) -> float:
        """
        Similarity between two examples.
        
        Parameters:
            example_a: First example
            example_b: Second example
        
        Returns:
            Kernel value
        """
        ...


class DirectKernel(ABC):
    """
    Base class for kernels working on one named representation.
    
    ``compute`` pulls the representation called ``representation`` off
    each example and hands both to ``kernel_computation``. Instances hold
    no per-example state and the representation name cannot change after
    construction, so a kernel can be shared across threads.
    
    Parameters:
        representation: Name of the representation the kernel operates on
    """
    
    #: Capability the representations must satisfy
    representation_type: type = object
    
    def __init__(self, representation: str):
        if not isinstance(representation, str) or not representation:
            raise ValueError("representation must be a non-empty string")
        self._representation = representation
    
    @property
    def representation(self) -> str:
        """Name of the representation the kernel operates on."""
        return self._representation
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}(representation={self._representation!r})"
    
    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.to_config() == other.to_config()
    
    def __hash__(self) -> int:
        return hash((type(self), self._representation))
    
    def to_config(self) -> Dict[str, Any]:
        """Constructor arguments of this kernel, see ``KernelFactory.from_config``."""
        return {
            "type": type(self).__dict__.get("kernel_type", type(self).__name__),
            "representation": self._representation,
        }
    
    def get_representation(self, example: Any) -> Any:
        """
        The representation this kernel operates on, taken from ``example``.
        
        Raises:
            MissingRepresentationError: if the example lacks it, or holds
                something other than ``representation_type``
        """
        representation = example.get_representation(self._representation)
        if representation is None:
            raise MissingRepresentationError(
                f"Example has no representation {self._representation!r}"
            )
        if not isinstance(representation, self.representation_type):
            raise MissingRepresentationError(
                f"Representation {self._representation!r} is a "
                f"{type(representation).__name__}, {type(self).__name__} "
                f"needs a {self.representation_type.__name__}"
            )
        return representation
    
    def compute(self, example_a: Any, example_b: Any) -> float:
        rep_a = self.get_representation(example_a)
        rep_b = self.get_representation(example_b)
        return self.kernel_computation(rep_a, rep_b)
    
    def __call__(self, example_a: Any, example_b: Any) -> float:
        return self.compute(example_a, example_b)
    
    @abstractmethod
    def kernel_computation(self, rep_a: Any, rep_b: Any) -> float:
        """
        Similarity between two resolved representations.
        
        Parameters:
            rep_a: Representation of the first example
            rep_b: Representation of the second example
        
        Returns:
            Kernel value
        """
    
    def build_gram_matrix(
        self,
        examples: Sequence[Any],
        others: Optional[Sequence[Any]] = None
    ) -> Float[Array, "n m"]:
        """
        Kernel values between every pair of examples.
        
        Parameters:
            examples: Examples indexing the rows
            others: Examples indexing the columns (default: ``examples``,
                in which case only the upper triangle is computed)
        
        Returns:
            Matrix of shape (len(examples), len(others))
        """
        symmetric = others is None
        if symmetric:
            others = examples
        
        rows = [self.get_representation(e) for e in examples]
        cols = rows if symmetric else [self.get_representation(e) for e in others]
        
        K = np.zeros((len(rows), len(cols)), dtype=np.float32)
        for i, rep_a in enumerate(rows):
            start = i if symmetric else 0
            for j in range(start, len(cols)):
                K[i, j] = self.kernel_computation(rep_a, cols[j])
                if symmetric and i != j:
                    K[j, i] = K[i, j]
        
        return jnp.asarray(K)
