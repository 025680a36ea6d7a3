"""
Base Exception Classes

Core exception hierarchy for the client.

Transport failures (``httpx.HTTPError``) and undecodable bodies
(``ValueError``) are not wrapped: they reach the caller unchanged.
"""

from typing import Optional, Dict, Any


class WoWClientError(Exception):
    """Base exception for all client errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.details = details or {}
        self.original_exception = original_exception
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class APIError(WoWClientError):
    """API-related errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message, details, original_exception)
        self.status_code = status_code
        self.endpoint = endpoint

        # Add to details
        self.details["status_code"] = status_code
        self.details["endpoint"] = endpoint


class AuthenticationError(APIError):
    """Token endpoint answered with a body that is not a usable token."""


class ValidationError(WoWClientError):
    """Argument validation errors."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.field = field
        self.value = value

        # Add to details
        self.details["field"] = field
        self.details["value"] = value


class MissingParameterError(ValidationError):
    """A required accessor argument was absent or empty."""

    def __init__(
        self,
        parameter: str,
        kind: str,
        value: Optional[Any] = None
    ):
        message = f"Missing required parameter '{parameter}' (expected {kind})"
        super().__init__(message, field=parameter, value=value)
        self.parameter = parameter
        self.kind = kind

        self.details["kind"] = kind


class InvalidParameterError(ValidationError):
    """An accessor argument is outside its allowed set of values."""

    def __init__(
        self,
        parameter: str,
        value: Any,
        allowed: Optional[Any] = None
    ):
        message = f"Invalid value for parameter '{parameter}': {value!r}"
        if allowed:
            message += f" (expected one of {', '.join(sorted(allowed))})"
        super().__init__(message, field=parameter, value=value)
        self.parameter = parameter
        self.allowed = allowed

        self.details["allowed"] = sorted(allowed) if allowed else None


class ConfigurationError(WoWClientError):
    """Configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message, details, original_exception)
        self.config_key = config_key

        # Add to details
        self.details["config_key"] = config_key
