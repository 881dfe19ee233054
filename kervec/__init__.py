"""
kervec - Vector representations and kernels for kernel-method learning

Dense and sparse feature vectors sharing one algebraic contract, a shared
feature dictionary, and kernels computing similarities between examples.
"""

__version__ = "0.1.0"

# Errors
from .exceptions import (
    KervecError,
    ParseError,
    TypeMismatchError,
    MissingRepresentationError,
    UnsupportedVariantError,
)

# Representations
from .representation import (
    Vector,
    FeatureDictionary,
    get_default_dictionary,
    DenseVector,
    SparseVector,
    merge_vectors,
    add_merged_representation,
    add_merged_representation_to_dataset,
)

# Examples
from .data.formats import (
    Example,
    SimpleExample,
    ExamplePair,
    Dataset,
)

# Kernels
from .kernels import (
    Kernel,
    DirectKernel,
    LinearKernel,
    KernelFactory,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "KervecError",
    "ParseError",
    "TypeMismatchError",
    "MissingRepresentationError",
    "UnsupportedVariantError",
    # Representations
    "Vector",
    "FeatureDictionary",
    "get_default_dictionary",
    "DenseVector",
    "SparseVector",
    "merge_vectors",
    "add_merged_representation",
    "add_merged_representation_to_dataset",
    # Examples
    "Example",
    "SimpleExample",
    "ExamplePair",
    "Dataset",
    # Kernels
    "Kernel",
    "DirectKernel",
    "LinearKernel",
    "KernelFactory",
]
