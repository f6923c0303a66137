"""Outcome types returned by import operations."""

from dataclasses import dataclass

from welfare_ledger.exceptions import ParseError, ValidationError, WriteError
from welfare_ledger.models.enums import ErrorKind


@dataclass(frozen=True)
class ErrorInfo:
    """Human-readable reason an operation failed."""

    kind: ErrorKind
    message: str
    line: int | None = None

    @classmethod
    def from_exception(cls, exc: Exception) -> "ErrorInfo":
        """Classify a ledger exception."""
        if isinstance(exc, ParseError):
            return cls(ErrorKind.PARSE, str(exc), exc.line)
        if isinstance(exc, ValidationError):
            return cls(ErrorKind.VALIDATION, str(exc))
        return cls(ErrorKind.WRITE, str(exc))


@dataclass(frozen=True)
class ImportResult:
    """Outcome of a batched import."""

    success: bool
    imported_count: int
    chunks_committed: int = 0
    error: ErrorInfo | None = None

    def raise_for_error(self) -> None:
        """Re-raise the failure as the matching exception, if any."""
        if self.error is None:
            return
        if self.error.kind == ErrorKind.PARSE:
            # message already carries the line prefix
            raise ParseError(self.error.message)
        if self.error.kind == ErrorKind.VALIDATION:
            raise ValidationError(self.error.message)
        raise WriteError(self.error.message, imported_count=self.imported_count)
