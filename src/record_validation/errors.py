"""
Errors raised by the validation adapter.

Rule violations are never raised: they come back as message strings.
Only usage problems surface as exceptions.
"""


class RecordValidationError(Exception):
    """Base class for adapter errors."""


class InvalidInputKind(RecordValidationError, TypeError):
    """The value handed to the adapter is not a record instance."""

    def __init__(self, value: object):
        self.kind = type(value).__name__
        if isinstance(value, type):
            detail = f"got the class {value.__name__!r}, expected an instance"
        else:
            detail = f"got {self.kind!r}"
        super().__init__(f"input must be a record (pydantic model or dataclass instance); {detail}")


class EngineError(RecordValidationError):
    """The validation engine could not evaluate the record's rules at all."""

    def __init__(self, original: Exception):
        self.original = original
        super().__init__(str(original))


class InvalidRequest(RecordValidationError):
    """A runner request document or its record_type path is unusable."""
