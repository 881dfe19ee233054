"""Sparse vector keyed by codes from a FeatureDictionary."""

import logging
import math
from typing import Dict, List, Optional, Tuple

from .base import Vector, format_value, to_single
from .dictionary import FeatureDictionary, get_default_dictionary
from ..exceptions import ParseError, TypeMismatchError

logger = logging.getLogger(__name__)

FEATURE_SEPARATOR = " "
NAME_VALUE_SEPARATOR = ":"


class SparseVector:
    """
    Sparse feature vector.
    
    Only active features are stored, as a ``code -> value`` dict; absent
    features are implicitly 0. Codes come from a ``FeatureDictionary``
    (the process-wide one unless another is injected), so two sparse
    vectors are only comparable when they share a dictionary.
    
    Text form: ``name:value`` tokens separated by spaces. The name is
    everything before the last ``:``, so names may contain ``:``.
    
    Parameters:
        dictionary: Feature dictionary resolving names to codes
    """
    
    __hash__ = None  # mutable
    
    def __init__(self, dictionary: Optional[FeatureDictionary] = None):
        self._dictionary = dictionary if dictionary is not None else get_default_dictionary()
        self._vector: Dict[int, float] = {}
    
    @classmethod
    def from_text(
        cls,
        text: str,
        dictionary: Optional[FeatureDictionary] = None
    ) -> "SparseVector":
        """Build a vector from its textual description."""
        vector = cls(dictionary)
        vector.set_data_from_text(text)
        return vector
    
    @property
    def dictionary(self) -> FeatureDictionary:
        """Dictionary this vector's codes belong to."""
        return self._dictionary
    
    @property
    def vector(self) -> Dict[int, float]:
        """The underlying ``code -> value`` mapping."""
        return self._vector
    
    def __len__(self) -> int:
        return len(self._vector)
    
    def get_feature_value(self, code: int) -> float:
        """Value stored under ``code``; 0.0 when absent."""
        return self._vector.get(code, 0.0)
    
    def get_feature_value_by_name(self, name: str) -> float:
        """Value of the feature called ``name``; 0.0 when absent."""
        return self._vector.get(self._dictionary.lookup(name), 0.0)
    
    def set_feature_value(self, name: str, value: float):
        """Set the feature ``name``, registering it if needed."""
        self._vector[self._dictionary.get_or_add(name)] = to_single(value)
    
    @staticmethod
    def _parse(text: str) -> List[Tuple[str, float]]:
        features = []
        for token in text.strip().split():
            separator_index = token.rfind(NAME_VALUE_SEPARATOR)
            if separator_index <= 0:
                raise ParseError(
                    f"Formatting error in the feature-value pair {token!r}"
                )
            name = token[:separator_index]
            try:
                value = float(token[separator_index + 1:])
            except ValueError:
                raise ParseError(
                    f"Malformed value in the feature-value pair {token!r}"
                ) from None
            logger.debug(f"Parsed feature {name!r} = {value}")
            features.append((name, value))
        return features
    
    def set_data_from_text(self, text: str):
        # Parse everything before touching the dictionary
        features = self._parse(text)
        self._vector = {}
        for name, value in features:
            self.set_feature_value(name, value)
    
    def get_text_from_data(self) -> str:
        return FEATURE_SEPARATOR.join(
            f"{self._dictionary.get_name(code)}{NAME_VALUE_SEPARATOR}{format_value(value)}"
            for code, value in self._vector.items()
        )
    
    def __str__(self) -> str:
        return self.get_text_from_data()
    
    def __repr__(self) -> str:
        return f"SparseVector({self.get_active_features()!r})"
    
    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, SparseVector):
            return False
        if self._dictionary is other._dictionary:
            return self._vector == other._vector
        return self.get_active_features() == other.get_active_features()
    
    def _check_operand(self, other, operation: str) -> "SparseVector":
        if not isinstance(other, SparseVector):
            raise TypeMismatchError(
                f"Expected a SparseVector to perform {operation}, "
                f"got {type(other).__name__}"
            )
        if other._dictionary is not self._dictionary:
            raise TypeMismatchError(
                f"Cannot perform {operation} between sparse vectors bound to "
                "different feature dictionaries"
            )
        return other
    
    def inner_product(self, other: "SparseVector") -> float:
        other = self._check_operand(other, "inner_product")
        
        # Iterate the shorter map, probe the longer one
        if len(self._vector) < len(other._vector):
            shortest, longest = self._vector, other._vector
        else:
            shortest, longest = other._vector, self._vector
        
        total = 0.0
        for code, value in shortest.items():
            total += value * longest.get(code, 0.0)
        return to_single(total)
    
    def scale(self, coeff: float):
        # Entries that become 0 stay active
        for code in self._vector:
            self._vector[code] = to_single(self._vector[code] * coeff)
    
    def add(
        self,
        other: "SparseVector",
        coeff: float = 1.0,
        self_coeff: Optional[float] = None
    ):
        other = self._check_operand(other, "add")
        if self_coeff is not None:
            self.scale(self_coeff)
        
        # Snapshot the operand in case other is self
        for code, value in list(other._vector.items()):
            self._vector[code] = to_single(self._vector.get(code, 0.0) + coeff * value)
    
    def get_squared_norm(self) -> float:
        return to_single(sum(value * value for value in self._vector.values()))
    
    def normalize(self):
        norm = math.sqrt(self.get_squared_norm())
        if norm == 0:
            return
        for code in self._vector:
            self._vector[code] = to_single(self._vector[code] / norm)
    
    def get_zero_vector(self) -> "SparseVector":
        return SparseVector(self._dictionary)
    
    def get_active_features(self) -> Dict[str, float]:
        return {
            self._dictionary.get_name(code): value
            for code, value in self._vector.items()
        }
    
    def merge(self, source: Vector, coefficient: float, prefix: str):
        """
        Copy the active features of ``source`` into this vector.
        
        Feature ``name`` of ``source`` is stored as ``prefix + "_" + name``
        with value ``coefficient * value``. An existing entry with the same
        qualified name is overwritten, not accumulated.
        
        Parameters:
            source: Vector whose features are copied (dense or sparse)
            coefficient: Scaling factor applied to every copied value
            prefix: Prefix qualifying the copied feature names
        """
        for name, value in source.get_active_features().items():
            self.set_feature_value(f"{prefix}_{name}", coefficient * value)
