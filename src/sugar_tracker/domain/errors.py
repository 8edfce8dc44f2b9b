"""Domain errors."""


class InvalidInputError(ValueError):
    """Raised when input is rejected before any state change."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field
