class TransportError(Exception):
    """The DNS-over-HTTPS transaction failed or returned malformed JSON."""

    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class EvaluationError(Exception):
    """A fatal failure while evaluating a record set; aborts the whole check."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class InvalidAddressError(ValueError):
    """The domain or email address entered by the user cannot be checked."""
