"""Dense vector backed by a JAX array."""

import re
import warnings
from typing import Dict, Optional, Sequence, Union

import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float

from .base import format_value, to_single
from ..exceptions import ParseError, TypeMismatchError

# A space or a comma can separate feature values
_SEPARATOR = re.compile(r"[ ,]")


class DenseVector:
    """
    Fixed-length dense feature vector.
    
    Feature ``i`` is the ``i``-th entry of a float32 array. The length is
    set at construction (or by ``set_data_from_text`` / ``set_feature_values``)
    and every binary operation requires an operand of the same length.
    
    Parameters:
        values: Feature values, in positional order
    """
    
    __hash__ = None  # mutable
    
    def __init__(
        self,
        values: Optional[Union[Sequence[float], np.ndarray, Array]] = None
    ):
        self._values: Float[Array, "n"] = jnp.zeros(0, dtype=jnp.float32)
        if values is not None:
            self.set_feature_values(values)
    
    @classmethod
    def from_text(cls, text: str) -> "DenseVector":
        """Build a vector from its textual description."""
        vector = cls()
        vector.set_data_from_text(text)
        return vector
    
    @property
    def values(self) -> Float[Array, "n"]:
        """The feature values."""
        return self._values
    
    @property
    def n_features(self) -> int:
        """Number of features."""
        return self._values.shape[0]
    
    def __len__(self) -> int:
        return self.n_features
    
    def set_feature_values(
        self,
        values: Union[Sequence[float], np.ndarray, Array]
    ):
        """Replace all values (and possibly the length)."""
        self._values = jnp.asarray(values, dtype=jnp.float32).reshape(-1)
    
    def get_feature_value(self, index: int) -> float:
        """Value of the ``index``-th feature."""
        # jnp indexing clamps out-of-range indices instead of raising
        if not -self.n_features <= index < self.n_features:
            raise IndexError(f"Feature index {index} out of range for length {self.n_features}")
        return float(self._values[index])
    
    def set_data_from_text(self, text: str):
        tokens = _SEPARATOR.split(text.strip())
        # Trailing separators do not add features
        while tokens and tokens[-1] == "":
            tokens.pop()
        
        features = []
        for token in tokens:
            try:
                features.append(float(token))
            except ValueError:
                raise ParseError(
                    f"Malformed value {token!r} in dense vector description"
                ) from None
        
        self.set_feature_values(features)
    
    def get_text_from_data(self) -> str:
        return " ".join(format_value(v) for v in np.asarray(self._values))
    
    def __str__(self) -> str:
        return self.get_text_from_data()
    
    def __repr__(self) -> str:
        return f"DenseVector([{', '.join(format_value(v) for v in np.asarray(self._values))}])"
    
    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, DenseVector):
            return False
        if self.n_features != other.n_features:
            return False
        return bool(jnp.all(self._values == other._values))
    
    def _check_operand(self, other, operation: str) -> "DenseVector":
        if not isinstance(other, DenseVector):
            raise TypeMismatchError(
                f"Expected a DenseVector to perform {operation}, "
                f"got {type(other).__name__}"
            )
        if other.n_features != self.n_features:
            raise TypeMismatchError(
                f"Cannot perform {operation} between dense vectors of length "
                f"{self.n_features} and {other.n_features}"
            )
        return other
    
    def inner_product(self, other: "DenseVector") -> float:
        other = self._check_operand(other, "inner_product")
        # Accumulate in double precision like get_squared_norm
        return to_single(np.dot(
            np.asarray(self._values, dtype=np.float64),
            np.asarray(other._values, dtype=np.float64)
        ))
    
    def scale(self, coeff: float):
        self._values = self._values * jnp.float32(coeff)
    
    def add(
        self,
        other: "DenseVector",
        coeff: float = 1.0,
        self_coeff: Optional[float] = None
    ):
        other = self._check_operand(other, "add")
        if self_coeff is not None:
            self.scale(self_coeff)
        self._values = self._values + jnp.float32(coeff) * other._values
    
    def get_squared_norm(self) -> float:
        values = np.asarray(self._values, dtype=np.float64)
        return to_single(np.dot(values, values))
    
    def normalize(self):
        norm = np.sqrt(self.get_squared_norm())
        if norm == 0:
            warnings.warn("Normalizing a zero DenseVector leaves it unchanged")
            return
        self._values = jnp.asarray(
            np.asarray(self._values, dtype=np.float64) / norm,
            dtype=jnp.float32
        )
    
    def get_zero_vector(self) -> "DenseVector":
        return DenseVector(jnp.zeros_like(self._values))
    
    def get_active_features(self) -> Dict[str, float]:
        """Every index is active; names are the stringified indices."""
        return {str(i): float(v) for i, v in enumerate(np.asarray(self._values))}
