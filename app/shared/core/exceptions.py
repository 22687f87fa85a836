# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines the special error types the share pages and LINE sign-in use to say
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI status constants, typing
# 🔄 Connected Modules / Calls From:
# app.main (exception handler), app.shared.config.supabase, knowledge and user_management modules

from typing import Any, Dict, Optional

from fastapi import status


class PetskubException(Exception):
    """
    Base exception class for the Petskub service.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self, request_id: Optional[str] = None) -> Dict[str, Any]:
        """Convert exception to the JSON error envelope."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "request_id": request_id,
            }
        }


# =============================================================================
# REQUEST & CONFIGURATION EXCEPTIONS
# =============================================================================

class MissingParameterError(PetskubException):
    """
    Exception raised when a required request parameter is absent or empty.
    """

    def __init__(
        self,
        message: str = "Missing required parameter",
        parameters: Optional[list] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if parameters:
            details["parameters"] = parameters

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="MISSING_PARAMETER"
        )


class ConfigurationError(PetskubException):
    """
    Exception raised when the deployment lacks required secrets or settings.
    """

    def __init__(
        self,
        message: str = "Service is not configured",
        setting: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if setting:
            details["setting"] = setting

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="CONFIGURATION_ERROR"
        )


# =============================================================================
# EXTERNAL SERVICE EXCEPTIONS
# =============================================================================

class ExternalServiceError(PetskubException):
    """
    Exception raised when external service calls fail.
    Used for the LINE token and profile endpoints.
    """

    def __init__(
        self,
        message: str = "External service error",
        service: Optional[str] = None,
        service_status: Optional[int] = None,
        service_response: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if service:
            details["service"] = service
        if service_status is not None:
            details["service_status"] = service_status
        if service_response:
            details["service_response"] = service_response

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code="EXTERNAL_SERVICE_ERROR"
        )


class DataStoreError(PetskubException):
    """
    Exception raised when the Supabase data store cannot be reached or queried.
    """

    def __init__(
        self,
        message: str = "Data store error",
        table: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if table:
            details["table"] = table

        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
            error_code="DATA_STORE_ERROR"
        )
