"""
Exception types raised by datapack building operations.

All of them are raised synchronously by the mutation call that caused
the problem, never deferred to compile time.
"""


class DatapackError(Exception):
    """Base class for datapack model errors."""
    pass


class InvalidNameError(DatapackError, ValueError):
    """Raised when a namespace name or resource path has illegal characters."""
    pass


class DuplicateNameError(DatapackError):
    """Raised when a namespace with the same name is already registered."""
    pass


class ReservedNameError(DuplicateNameError):
    """Raised when the built-in 'minecraft' namespace name is used.

    The datapack always owns that namespace, so the name counts as taken.
    """
    pass


class DuplicateEntityError(DatapackError):
    """Raised when a category already holds an entity with the same path."""
    pass


class ValueTypeMismatchError(DatapackError, TypeError):
    """Raised when a value of another type is put into a typed value array."""
    pass
