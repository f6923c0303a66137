"""Custom exception hierarchy for welfare-ledger."""


class LedgerError(Exception):
    """Base exception for all welfare-ledger errors."""


class ParseError(LedgerError):
    """Raised when a CSV row or field cannot be parsed.

    ``line`` is the 1-based line number in the source text, when known.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.line = line

    def __str__(self) -> str:
        message = super().__str__()
        if self.line is None:
            return message
        return f"line {self.line}: {message}"


class ValidationError(LedgerError):
    """Raised when user input is rejected before any store I/O."""


class StoreError(LedgerError):
    """Raised when the document store fails a read or a commit."""


class WriteError(StoreError):
    """Raised when a batched import stops on a failed chunk commit."""

    def __init__(self, message: str, imported_count: int = 0) -> None:
        super().__init__(message)
        self.imported_count = imported_count


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""
