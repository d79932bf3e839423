# Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
# All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
# See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
# Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.

"""
Error types and error codes for stdkit.
Provides structured error handling across all packages.

Two families live here:
- StdkitError and its subclasses: expected, recoverable failures
  (missing configuration key, undecodable payload, bad path).
- ConfigurationTypeError: a programming error raised when a configuration
  value does not match its declared type. It is intentionally not a
  StdkitError so that ``except StdkitError`` never swallows it.
"""

from enum import Enum
from typing import Dict, Any, Optional


class ErrorCode(str, Enum):
    """Standard error codes used across stdkit."""
    NOT_FOUND = "not_found"
    CONFIGURATION_ERROR = "configuration_error"
    ENCODING_ERROR = "encoding_error"
    INVALID_PATH = "invalid_path"
    TYPE_MISMATCH = "type_mismatch"
    INTERNAL_ERROR = "internal_error"

    def __str__(self) -> str:
        return self.value


# Error code constants for easy import
NOT_FOUND = ErrorCode.NOT_FOUND
CONFIGURATION_ERROR = ErrorCode.CONFIGURATION_ERROR
ENCODING_ERROR = ErrorCode.ENCODING_ERROR
INVALID_PATH = ErrorCode.INVALID_PATH
TYPE_MISMATCH = ErrorCode.TYPE_MISMATCH
INTERNAL_ERROR = ErrorCode.INTERNAL_ERROR


class StdkitError(Exception):
    """Base exception for all recoverable stdkit errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        result = {
            'error': self.error_code.value,
            'message': self.message,
            'details': self.details
        }

        if self.cause:
            result['cause'] = str(self.cause)

        return result

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class ConfigurationNotFoundError(StdkitError, KeyError):
    """Raised when a configuration path does not exist."""

    def __init__(self, path: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Invalid configuration [{path}]", NOT_FOUND, details)
        self.path = path
        self.details['path'] = path

    # KeyError quotes its argument; keep the structured message instead
    def __str__(self) -> str:
        return StdkitError.__str__(self)


class ConfigurationError(StdkitError):
    """Raised when a configuration source cannot be used."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, CONFIGURATION_ERROR, details, cause)
        self.source = source

        if source:
            self.details['source'] = source


class EncodingError(StdkitError, ValueError):
    """Raised when data cannot be encoded or decoded."""

    def __init__(
        self,
        message: str,
        format_name: Optional[str] = None,
        cause: Optional[Exception] = None
    ):
        super().__init__(message, ENCODING_ERROR, cause=cause)
        self.format_name = format_name

        if format_name:
            self.details['format'] = format_name


class PathError(StdkitError, ValueError):
    """Raised when a filesystem path cannot be resolved."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, INVALID_PATH)
        self.path = path

        if path:
            self.details['path'] = path


class ConfigurationTypeError(TypeError):
    """
    Raised when a configuration value does not match its declared type.

    This signals a mistake by the author of the configuration or of the
    configuration class, so it is not part of the StdkitError hierarchy.
    """

    error_code = TYPE_MISMATCH

    def __init__(self, field: str, expected: str, actual: str, instance_check: bool = False):
        if instance_check:
            message = (
                f"Invalid configuration [{field}] instance value, "
                f"expected [{expected}], but got [{actual}]"
            )
        else:
            message = (
                f"Invalid configuration [{field}] value, "
                f"expected [{expected}], but got [{actual}]"
            )
        super().__init__(message)
        self.message = message
        self.field = field
        self.expected = expected
        self.actual = actual

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            'error': self.error_code.value,
            'message': self.message,
            'details': {
                'field': self.field,
                'expected': self.expected,
                'actual': self.actual,
            }
        }


__all__ = [
    'ErrorCode',
    'NOT_FOUND', 'CONFIGURATION_ERROR', 'ENCODING_ERROR', 'INVALID_PATH',
    'TYPE_MISMATCH', 'INTERNAL_ERROR',
    'StdkitError', 'ConfigurationNotFoundError', 'ConfigurationError',
    'EncodingError', 'PathError', 'ConfigurationTypeError',
]
