"""
stdkit Python Package

Collection of frequently used helpers: nested mapping access, string
case conversion, JSON/YAML encoding, path normalization and a
declarative, type-checked configuration base class.
"""

__version__ = "0.1.0"
__author__ = "stdkit contributors"

from .config import BaseConfiguration, ConfigurationInterface, TypeRule, Primitive, InstanceOf
from .errors import (
    StdkitError,
    ConfigurationNotFoundError,
    ConfigurationTypeError,
    ConfigurationError,
    EncodingError,
    PathError,
)
from .util import nested

__all__ = [
    "BaseConfiguration",
    "ConfigurationInterface",
    "TypeRule",
    "Primitive",
    "InstanceOf",
    "StdkitError",
    "ConfigurationNotFoundError",
    "ConfigurationTypeError",
    "ConfigurationError",
    "EncodingError",
    "PathError",
    "nested",
]
