"""
Custom exceptions and error handling for the plann.er API.

Defines application-specific exceptions with error codes for consistent
error handling across Lambda functions and HTTP responses.

Usage:
    from core.errors import NotFoundError, ErrorCode

    raise NotFoundError("Trip 1234 not found", code=ErrorCode.TRIP_NOT_FOUND)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Lookup errors
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    PARTICIPANT_NOT_FOUND = "PARTICIPANT_NOT_FOUND"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_ACTIVITY_DATE = "INVALID_ACTIVITY_DATE"
    INVALID_TRIP_DATES = "INVALID_TRIP_DATES"

    # Mail errors
    MAIL_DISPATCH_FAILED = "MAIL_DISPATCH_FAILED"

    # System errors
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.TRIP_NOT_FOUND: "Trip not found.",
    ErrorCode.PARTICIPANT_NOT_FOUND: "Participant not found.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.INVALID_ACTIVITY_DATE: "Activity date must fall within the trip dates.",
    ErrorCode.INVALID_TRIP_DATES: "Trip end date must not be before its start date.",
    ErrorCode.MAIL_DISPATCH_FAILED: "Your changes were saved but the email could not be sent. Please try again.",
    ErrorCode.STORE_UNAVAILABLE: "The service is temporarily unavailable. Please try again later.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}

HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.TRIP_NOT_FOUND: 404,
    ErrorCode.PARTICIPANT_NOT_FOUND: 404,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.INVALID_ACTIVITY_DATE: 400,
    ErrorCode.INVALID_TRIP_DATES: 400,
    ErrorCode.MAIL_DISPATCH_FAILED: 502,
    ErrorCode.STORE_UNAVAILABLE: 503,
    ErrorCode.INTERNAL_ERROR: 500,
}


class PlannerError(Exception):
    """Base exception for all plann.er errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])

    @property
    def status_code(self) -> int:
        return HTTP_STATUS.get(self.code, 500)


class NotFoundError(PlannerError):
    """Referenced trip or participant does not exist."""

    pass


class ValidationError(PlannerError):
    """Input validation or schema validation failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code=code)


class DispatchError(PlannerError):
    """Mail dispatcher failed to hand off a message."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.MAIL_DISPATCH_FAILED):
        super().__init__(message, code=code)


class StoreError(PlannerError):
    """Trip store is unreachable or a query failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORE_UNAVAILABLE):
        super().__init__(message, code=code)
