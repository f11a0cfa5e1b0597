"""Custom exception hierarchy for better error handling."""
from typing import Any, Dict

from fastapi import status
from fastapi.responses import JSONResponse


class ILOBuilderException(Exception):
    """Base exception for all application errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "INTERNAL_ERROR"
    public_message: str = "An error occurred while enhancing the ILO"

    def to_response_body(self) -> Dict[str, Any]:
        return {
            "error": self.public_message,
            "details": str(self),
            "code": self.error_code,
        }

    def to_json_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_response_body())


class MissingILOException(ILOBuilderException):
    """Raised when an enhancement request carries no ILO text."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "ILO_MISSING"
    public_message = "No ILO provided"

    def __init__(self):
        super().__init__("The request body must include a non-empty 'ilo' field")


class EnhancementUpstreamException(ILOBuilderException):
    """Raised when the text-generation service fails or returns nothing usable."""

    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "UPSTREAM_ERROR"

    def __init__(self, original_error: Exception):
        self.original_error = original_error
        super().__init__(f"LLM provider error: {str(original_error)}")

    def to_response_body(self) -> Dict[str, Any]:
        # Provider messages can carry request ids and deployment names.
        return {
            "error": self.public_message,
            "details": "AI service temporarily unavailable",
            "code": self.error_code,
        }


class InvalidRequestException(ILOBuilderException):
    """Raised when the request body is not JSON or does not match the request model."""

    status_code = status.HTTP_400_BAD_REQUEST
    error_code = "INVALID_REQUEST"
    public_message = "Invalid request"

    def __init__(self):
        super().__init__("The request body must be a JSON object with a string 'ilo' field")
