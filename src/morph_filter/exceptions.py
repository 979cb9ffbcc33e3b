"""
Custom exceptions for the morphology filter
Centralized exception hierarchy with error codes and details
"""

from typing import Any, Dict, Optional


class MorphFilterException(Exception):
    """Base exception for the morphology filter package"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize exception

        Args:
            message: Error message
            error_code: Machine readable error code
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ConfigurationError(MorphFilterException):
    """Configuration related errors"""
    pass


class ServiceInitializationError(MorphFilterException):
    """Morphology backend initialization errors"""
    pass


class ValidationError(MorphFilterException):
    """Invalid attribute values"""
    pass


class TokenStreamError(MorphFilterException):
    """Token stream contract violations"""
    pass
