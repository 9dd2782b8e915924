"""
Structured error types for rbglue.

Every failure the tool can report is a ``GlueError`` subclass carrying a
category, structured context and an optional chained cause, so the CLI can
print a one-line diagnosis and tests can assert on the category instead of
on message text.

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                        GlueError                          │
        │          (category, context, cause, to_dict())            │
        ├──────────────────────────────────────────────────────────┤
        │  MissingArgumentError   DiscoveryError    RenderError     │
        │  (VALIDATION)           (DISCOVERY)       (TEMPLATE)      │
        │                                                           │
        │  FragmentParseError     AlreadyPublishedError             │
        │  (PARSE)                (STATE)                           │
        └──────────────────────────────────────────────────────────┘

Examples:
    >>> error = DiscoveryError("interpreter exited with status 1")
    >>> error.category
    <ErrorCategory.DISCOVERY: 'DISCOVERY'>
    >>> error.with_context(package="ostruct").context.package
    'ostruct'

Tags:
    error-handling, exception-hierarchy, error-context, rbglue

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories used for reporting and exit handling."""

    VALIDATION = "VALIDATION"    # Missing or malformed inputs
    CONFIG = "CONFIG"            # Settings file or environment problems
    DISCOVERY = "DISCOVERY"      # Helper subprocess failures
    TEMPLATE = "TEMPLATE"        # Template lookup and rendering
    PARSE = "PARSE"              # Implementor fragment parsing
    STATE = "STATE"              # Publish slot misuse
    INTERNAL = "INTERNAL"        # Bugs, unexpected state


@dataclass
class ErrorContext:
    """Structured metadata attached to an error.

    Attributes:
        package: Library being imported
        path: File the operation was reading or writing
        command: Subprocess argv, when one was involved
        metadata: Additional key-value pairs
    """

    package: str | None = None
    path: str | None = None
    command: list[str] | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result: dict[str, Any] = {}
        for key in ["package", "path", "command"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class GlueError(Exception):
    """Base exception for all rbglue errors.

    Subclasses set ``default_category``; callers may override it per
    instance. ``cause`` is chained onto ``__cause__`` so tracebacks keep the
    original failure.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> GlueError:
        """
        Add context to this error (fluent API).

        Usage:
            raise RenderError("Template missing").with_context(
                path="templates/rust_glue.rs.j2",
            )
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# INPUT ERRORS
# =============================================================================


class MissingArgumentError(GlueError):
    """A required positional input was not supplied."""

    default_category = ErrorCategory.VALIDATION

    def __init__(self, message: str, *, argument: str | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.argument = argument
        if argument is not None:
            self.context.metadata["argument"] = argument


class ConfigError(GlueError):
    """Settings could not be loaded or are invalid."""

    default_category = ErrorCategory.CONFIG


# =============================================================================
# GENERATION ERRORS
# =============================================================================


class DiscoveryError(GlueError):
    """The constant discovery subprocess failed.

    ``returncode`` is ``None`` when the process never ran to completion
    (interpreter not found, timeout).
    """

    default_category = ErrorCategory.DISCOVERY

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        stderr: str = "",
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.returncode = returncode
        self.stderr = stderr

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.returncode is not None:
            result["returncode"] = self.returncode
        if self.stderr:
            result["stderr"] = self.stderr
        return result


class RenderError(GlueError):
    """A template could not be loaded or rendered."""

    default_category = ErrorCategory.TEMPLATE


# =============================================================================
# IMPLEMENTOR TABLE ERRORS
# =============================================================================


class FragmentParseError(GlueError):
    """An implementor fragment line could not be understood."""

    default_category = ErrorCategory.PARSE

    def __init__(self, message: str, *, line: int | None = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.line = line
        if line is not None:
            self.context.metadata["line"] = line


class AlreadyPublishedError(GlueError):
    """A publish-once slot received a second table."""

    default_category = ErrorCategory.STATE


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "GlueError",
    "MissingArgumentError",
    "ConfigError",
    "DiscoveryError",
    "RenderError",
    "FragmentParseError",
    "AlreadyPublishedError",
]
