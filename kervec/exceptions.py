"""Error types raised by kervec."""


class KervecError(Exception):
    """Base class for all kervec errors."""


class ParseError(KervecError, ValueError):
    """A textual vector description could not be parsed."""


class TypeMismatchError(KervecError, TypeError):
    """
    An algebraic operation was given an incompatible operand.
    
    Raised for cross-variant operations (dense with sparse), dense operands
    of different length, and sparse operands bound to different dictionaries.
    """


class MissingRepresentationError(KervecError, LookupError):
    """An example has no representation of the requested name or capability."""


class UnsupportedVariantError(KervecError, TypeError):
    """An operation has no rule for the given kind of example."""
