"""Exceptions raised while annotating a table."""


class TfIdfError(Exception):
    """Base class for annotator errors."""


class ColumnNotFound(TfIdfError, KeyError):
    """A referenced column does not exist in the table."""

    def __init__(self, column, available=()):
        self.column = column
        self.available = list(available)
        super().__init__(column)

    def __str__(self) -> str:
        return f"Column not found: {self.column!r} (available: {self.available})"


class TypeMismatch(TfIdfError, TypeError):
    """The count column is not numeric."""

    def __init__(self, column, dtype, detail: str = ""):
        self.column = column
        self.dtype = dtype
        message = f"Count column {column!r} must be numeric, got dtype {dtype}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
