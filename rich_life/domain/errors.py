"""Domain errors raised at the document boundary."""


class DocumentValidationError(ValueError):
    """Raised when an imported document does not have the expected shape."""


class EmptyHistoryError(LookupError):
    """Raised when a computation needs a snapshot and none exists."""


__all__ = ["DocumentValidationError", "EmptyHistoryError"]
