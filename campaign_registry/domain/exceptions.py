"""Base exception classes for the campaign registry domain layer."""


class RegistryError(Exception):
    """Base exception for all registry errors.

    All registry-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
