"""Exceptions raised by string operations."""


class InvalidArgumentError(ValueError):
    """Raised when an operation receives an argument of the wrong type.

    Validation runs before any scanning, so an operation that raises this
    error has produced no partial result.
    """

    def __init__(self, argument: str, message: str) -> None:
        """Initialize invalid argument error.

        Args:
            argument: Name of the offending parameter.
            message: Human-readable error description.
        """
        self.argument = argument
        self.message = message
        super().__init__(message)
