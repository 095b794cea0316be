"""Order intake errors."""


class OrderIntakeError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingInput(OrderIntakeError):
    """No order message was supplied."""

    status_code = 400


class ExtractionRateLimited(OrderIntakeError):
    """The completion service refused the request due to rate limiting."""


class ExtractionExhausted(OrderIntakeError):
    """Every extraction attempt was rate limited."""


class ExtractionFailed(OrderIntakeError):
    """The completion service failed or returned output that is not JSON."""


class MalformedOrder(OrderIntakeError):
    """Extraction output does not describe a usable order."""


class StorageFailure(OrderIntakeError):
    """Appending to or reading from the spreadsheet failed."""
