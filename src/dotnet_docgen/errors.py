"""
Typed errors for the documentation generator.

Every failure that originates in this package is a ``DocGenError`` carrying
a category, the path or location it concerns, and the underlying exception
as ``cause``. Errors raised by a translation service are NOT wrapped here:
the generator lets them reach the caller unchanged.

Architecture:
    ::

        DocGenError (category, cause)
          ├── ConfigError               (CONFIG)       settings file unreadable/invalid
          ├── ModelLoadError            (MODEL)        declarations file unreadable/invalid
          ├── TabletError               (TRANSLATION)  tablet file unreadable/invalid
          └── UntranslatableSampleError (TRANSLATION)  strict lookup miss

Examples:
    >>> error = ModelLoadError("bad declarations", path="api.yaml")
    >>> error.category
    <ErrorCategory.MODEL: 'MODEL'>
    >>> error.to_dict()["path"]
    'api.yaml'

Tags:
    error-handling, exception-hierarchy, docgen
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and reporting."""

    CONFIG = "CONFIG"
    MODEL = "MODEL"
    TRANSLATION = "TRANSLATION"
    INTERNAL = "INTERNAL"


class DocGenError(Exception):
    """Base exception for all documentation generator errors.

    Subclasses set ``default_category``; callers may pass ``cause`` to chain
    the original exception.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class ConfigError(DocGenError):
    """Settings file is missing, unreadable, or invalid."""

    default_category = ErrorCategory.CONFIG

    def __init__(self, message: str, *, path: str | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.path:
            result["path"] = self.path
        return result


class ModelLoadError(DocGenError):
    """Declarations file could not be read or failed validation."""

    default_category = ErrorCategory.MODEL

    def __init__(self, message: str, *, path: str | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.path:
            result["path"] = self.path
        return result


class TabletError(DocGenError):
    """Translation tablet could not be read or has an invalid shape."""

    default_category = ErrorCategory.TRANSLATION

    def __init__(self, message: str, *, path: str | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.path:
            result["path"] = self.path
        return result


class UntranslatableSampleError(DocGenError):
    """A code sample has no translation and strict mode forbids passing it through."""

    default_category = ErrorCategory.TRANSLATION

    def __init__(self, location: str, language: str, source: str):
        self.location = location
        self.language = language
        self.source = source
        first_line = source.strip().splitlines()[0] if source.strip() else ""
        super().__init__(
            f"No {language} translation for sample at {location}: {first_line!r}"
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["location"] = self.location
        result["language"] = self.language
        return result


__all__ = [
    "ErrorCategory",
    "DocGenError",
    "ConfigError",
    "ModelLoadError",
    "TabletError",
    "UntranslatableSampleError",
]
