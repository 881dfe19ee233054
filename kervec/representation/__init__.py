"""Vector representations and the feature dictionary."""

from .base import Vector
from .dictionary import (
    NOT_FOUND,
    DictionarySnapshot,
    FeatureDictionary,
    get_default_dictionary,
)
from .dense import DenseVector
from .sparse import SparseVector
from .utils import (
    merge_vectors,
    add_merged_representation,
    add_merged_representation_to_dataset,
)

__all__ = [
    "Vector",
    "NOT_FOUND",
    "DictionarySnapshot",
    "FeatureDictionary",
    "get_default_dictionary",
    "DenseVector",
    "SparseVector",
    "merge_vectors",
    "add_merged_representation",
    "add_merged_representation_to_dataset",
]
