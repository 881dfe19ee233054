"""Vector capability shared by the dense and sparse representations."""

from typing import Dict, Optional, Protocol, runtime_checkable

import numpy as np


def format_value(value: float) -> str:
    """Shortest text that parses back to the same single-precision value."""
    return str(np.float32(value))


def to_single(value: float) -> float:
    """Round ``value`` to single precision."""
    return float(np.float32(value))


@runtime_checkable
class Vector(Protocol):
    """
    Protocol for vector representations.
    
    Implemented by exactly two classes, ``DenseVector`` and ``SparseVector``.
    Binary operations only accept an operand of the same class and raise
    ``TypeMismatchError`` otherwise.
    """
    
    def set_data_from_text(self, text: str) -> None:
        """
        Replace the content with the values described by ``text``.
        
        Raises:
            ParseError: if a token is malformed
        """
        ...
    
    def get_text_from_data(self) -> str:
        """Textual description accepted by ``set_data_from_text``."""
        ...
    
    def inner_product(self, other: "Vector") -> float:
        """Dot product with a vector of the same kind."""
        ...
    
    def scale(self, coeff: float) -> None:
        """Multiply every value by ``coeff`` in place."""
        ...
    
    def add(
        self,
        other: "Vector",
        coeff: float = 1.0,
        self_coeff: Optional[float] = None
    ) -> None:
        """
        In place ``self = self_coeff * self + coeff * other``.
        
        When ``self_coeff`` is given, ``self`` is scaled first and ``other``
        added afterwards, in two separate passes.
        """
        ...
    
    def normalize(self) -> None:
        """Divide every value by the L2 norm; no-op on the zero vector."""
        ...
    
    def get_zero_vector(self) -> "Vector":
        """New all-zero vector of the same kind and shape."""
        ...
    
    def get_squared_norm(self) -> float:
        """Sum of squared values."""
        ...
    
    def get_active_features(self) -> Dict[str, float]:
        """Mapping from feature name to value for every stored entry."""
        ...
