"""
Application Custom Exceptions

Purpose:
    - Standardize error handling across the chatbot engine
    - Prevent leaking collaborator internals to callers
    - Maintain consistent API error format
"""

# Messages
from . import messages





class AppException(Exception):
    """
    Base application exception.
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        status_code: int = 400,
        details: str = None
    ):
        """
        Args:
            error_code (str): Unique business error identifier
            message (str): User-friendly error message
            status_code (int): HTTP status code (default: 400)
            details (str): Optional internal/debug details
        """

        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details

        super().__init__(message)



    def to_dict(self) -> dict:
        """
        Convert exception to standardized API response format.
        Internal details are never part of the response body.
        """

        return {
            "status": "error",
            "error_code": self.error_code,
            "message": self.message
        }





# --------------------------------------------
# Specific Exception Types
# --------------------------------------------

class ValidationException(AppException):
    """
    Raised when request input is empty or malformed.
    """

    def __init__(self, message: str, details: str = None, error_code: str = "VALIDATION_ERROR"):
        super().__init__(
            error_code = error_code,
            message = message,
            status_code = 400,
            details = details
        )





class CollaboratorUnavailableException(AppException):
    """
    Raised when persistence, product search or the AI provider is unreachable.
    Most call sites degrade in place; it only reaches the caller when a
    conversation cannot be created.
    """

    def __init__(self, collaborator: str, details: str = None):
        self.collaborator = collaborator
        super().__init__(
            error_code = "COLLABORATOR_UNAVAILABLE",
            message = messages.ERROR["TECHNICAL_DIFFICULTIES"],
            status_code = 503,
            details = details
        )





class ProcessingException(AppException):
    """
    Raised when a chat turn could not produce any response text.
    """

    def __init__(self, details: str = None):
        super().__init__(
            error_code = "PROCESSING_ERROR",
            message = messages.ERROR["TECHNICAL_DIFFICULTIES"],
            status_code = 500,
            details = details
        )





class NotFoundException(AppException):
    """
    Raised when resource is not found.
    """

    def __init__(self, message: str = "Resource not found"):
        super().__init__(
            error_code = "NOT_FOUND",
            message = message,
            status_code = 404
        )





class InternalServerException(AppException):
    """
    Raised for unexpected system errors.
    """

    def __init__(self, details: str = None):
        super().__init__(
            error_code = "INTERNAL_SERVER_ERROR",
            message = "Something went wrong. Please try again later.",
            status_code = 500,
            details  = details
        )
