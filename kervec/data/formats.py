"""Minimal learning-example structures carrying named representations."""

import warnings
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from ..exceptions import MissingRepresentationError


class Example:
    """Base class for learning examples."""

    def get_representation(self, name: str) -> Any:
        """
        Representation registered under ``name``.

        Examples carrying no representations of their own (e.g. pairs)
        always raise.

        Raises:
            MissingRepresentationError: if there is none
        """
        raise MissingRepresentationError(
            f"{type(self).__name__} {getattr(self, 'id', None)!r} has no representation {name!r}"
        )


@dataclass
class SimpleExample(Example):
    """
    Example owning a set of named representations.
    
    Attributes:
        representations: Mapping from representation name to representation
        id: Optional identifier
        metadata: Optional dict for additional info (labels, source, etc.)
    """
    representations: Dict[str, Any] = field(default_factory=dict)
    id: Optional[str] = None
    metadata: Optional[Dict] = None
    
    def get_representation(self, name: str) -> Any:
        """
        Representation registered under ``name``.
        
        Raises:
            MissingRepresentationError: if there is none
        """
        try:
            return self.representations[name]
        except KeyError:
            raise MissingRepresentationError(
                f"Example {self.id!r} has no representation {name!r}"
            ) from None
    
    def add_representation(self, name: str, representation: Any):
        """Attach ``representation`` under ``name``, replacing any previous one."""
        if name in self.representations:
            warnings.warn(f"Replacing representation {name!r} of example {self.id!r}")
        self.representations[name] = representation


@dataclass
class ExamplePair(Example):
    """
    Composite example made of two sub-examples.
    
    Attributes:
        left: First example of the pair
        right: Second example of the pair
        id: Optional identifier
    """
    left: Example
    right: Example
    id: Optional[str] = None
    
    def get_left_example(self) -> Example:
        return self.left
    
    def get_right_example(self) -> Example:
        return self.right


@dataclass
class Dataset:
    """
    Ordered collection of examples.
    
    Attributes:
        examples: The examples, in iteration order
    """
    examples: List[Example] = field(default_factory=list)
    
    def __iter__(self) -> Iterator[Example]:
        return iter(self.examples)
    
    def __len__(self) -> int:
        return len(self.examples)
    
    def add_example(self, example: Example):
        self.examples.append(example)
