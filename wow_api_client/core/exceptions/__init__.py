"""
Core Exceptions

Base exception classes for the client.
"""

from .base import (
    WoWClientError,
    APIError,
    AuthenticationError,
    ValidationError,
    MissingParameterError,
    InvalidParameterError,
    ConfigurationError,
)

__all__ = [
    "WoWClientError",
    "APIError",
    "AuthenticationError",
    "ValidationError",
    "MissingParameterError",
    "InvalidParameterError",
    "ConfigurationError",
]
