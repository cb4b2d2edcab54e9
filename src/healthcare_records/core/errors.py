"""
Error types raised by the record model, the binder and the row source.
"""


class RecordsError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgument(RecordsError, ValueError):
    """A record mutator was handed a missing (None) value."""


class BindingError(RecordsError):
    """A row could not be bound onto a record type."""


class MissingBindingError(BindingError):
    """No getter on the row cursor matches a declared field."""


class AmbiguousBindingError(BindingError):
    """More than one getter on the row cursor matches a declared field."""


class TypeMismatchError(BindingError, TypeError):
    """A getter returned a value that does not fit the field's declared type."""


class RowSourceError(RecordsError):
    """Executing a statement or reading a row failed."""
