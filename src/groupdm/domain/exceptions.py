"""Domain exceptions."""


class PayloadError(ValueError):
    """Raised when a service payload cannot be turned into an entity.

    Missing required keys and malformed values both end up here.
    """

    def __init__(self, key: str, message: str = "") -> None:
        """Initialize.

        Args:
            key: Payload key that failed.
            message: Error message (optional).
        """
        self.key = key
        super().__init__(message or f"Invalid or missing payload field '{key}'")
