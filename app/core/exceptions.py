from typing import Optional


class MercadoFreshError(Exception):
    """Base exception for Mercado Fresh domain errors."""

    status_code = 500
    default_message = "internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[dict] = None):
        """Initialize the exception.

        Args:
            message: Error message
            details: Additional error details
        """
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def __str__(self):
        return self.message

    def to_dict(self):
        """Convert the exception to a dictionary."""
        error_dict = {
            'error': self.__class__.__name__,
            'message': self.message,
        }

        if self.details:
            error_dict['details'] = self.details

        return error_dict


class ValidationFailedError(MercadoFreshError):
    """Raised when input is missing or violates a business rule."""

    status_code = 422
    default_message = "validation failed"


class AlreadyExistsError(MercadoFreshError):
    """Raised when a business key is already taken by another record."""

    status_code = 409
    default_message = "already exists"


class NotFoundError(MercadoFreshError):
    """Raised when a requested or referenced record does not exist."""

    status_code = 404
    default_message = "not found"
