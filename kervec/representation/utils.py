"""Helpers building concatenated sparse representations."""

from typing import Iterable, Optional, Sequence

from .base import Vector
from .dictionary import FeatureDictionary
from .sparse import SparseVector
from ..data.formats import Example, ExamplePair, SimpleExample
from ..exceptions import MissingRepresentationError, UnsupportedVariantError


def merge_vectors(
    example: SimpleExample,
    representation_names: Sequence[str],
    weights: Sequence[float],
    dictionary: Optional[FeatureDictionary] = None
) -> SparseVector:
    """
    Concatenate several vector representations of ``example``.
    
    Each representation is scaled by its weight and its features are
    prefixed with the representation name (``"rep_feature"``).
    
    Parameters:
        example: Example whose vectors must be concatenated
        representation_names: Names of the vectors to concatenate, in order
        weights: Scaling factor of each vector
        dictionary: Feature dictionary of the result (default: process-wide)
    
    Returns:
        New SparseVector holding the concatenation
    """
    if len(representation_names) != len(weights):
        raise ValueError("representation_names and weights must have the same length")
    
    combination = SparseVector(dictionary)
    for name, weight in zip(representation_names, weights):
        representation = example.get_representation(name)
        if not isinstance(representation, Vector):
            raise MissingRepresentationError(
                f"Representation {name!r} is a {type(representation).__name__}, not a Vector"
            )
        combination.merge(representation, weight, name)
    
    return combination


def add_merged_representation(
    example: Example,
    representation_names: Sequence[str],
    weights: Sequence[float],
    combination_name: str,
    dictionary: Optional[FeatureDictionary] = None
):
    """
    Attach the concatenation of several vectors as a new representation.
    
    For an ``ExamplePair`` both sub-examples receive their own combination
    under the same name, recursively.
    
    Parameters:
        example: Example receiving the new representation
        representation_names: Names of the vectors to concatenate
        weights: Scaling factor of each vector
        combination_name: Name of the new representation
        dictionary: Feature dictionary of the result (default: process-wide)
    """
    if isinstance(example, SimpleExample):
        combination = merge_vectors(example, representation_names, weights, dictionary)
        example.add_representation(combination_name, combination)
    elif isinstance(example, ExamplePair):
        for sub_example in (example.get_left_example(), example.get_right_example()):
            add_merged_representation(
                sub_example, representation_names, weights, combination_name, dictionary
            )
    else:
        raise UnsupportedVariantError(
            f"Unsupported example type: {type(example).__name__}"
        )


def add_merged_representation_to_dataset(
    dataset: Iterable[Example],
    representation_names: Sequence[str],
    weights: Sequence[float],
    combination_name: str,
    dictionary: Optional[FeatureDictionary] = None
):
    """
    Apply ``add_merged_representation`` to every example of ``dataset``.
    
    Examples are processed in iteration order; if one fails, the examples
    before it keep their new representation.
    """
    for example in dataset:
        add_merged_representation(
            example, representation_names, weights, combination_name, dictionary
        )
