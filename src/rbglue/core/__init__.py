"""
Core primitives shared by the glue generator, the implementor tools and the
CLI: typed errors, structured logging and settings.
"""

from rbglue.core.errors import (
    AlreadyPublishedError,
    ConfigError,
    DiscoveryError,
    ErrorCategory,
    ErrorContext,
    FragmentParseError,
    GlueError,
    MissingArgumentError,
    RenderError,
)
from rbglue.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
from rbglue.core.settings import GlueSettings

__all__ = [
    # errors
    "ErrorCategory",
    "ErrorContext",
    "GlueError",
    "MissingArgumentError",
    "ConfigError",
    "DiscoveryError",
    "RenderError",
    "FragmentParseError",
    "AlreadyPublishedError",
    # logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    "LogContext",
    # settings
    "GlueSettings",
]
