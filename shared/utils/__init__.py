"""
Shared utilities for the Hello Relay platform

This package contains common utilities used across all services.
"""

from .logger import setup_logging, configure_structlog, init_logging
from .middleware import RequestLoggingMiddleware

__all__ = [
    "setup_logging",
    "configure_structlog",
    "init_logging",
    "RequestLoggingMiddleware",
]

__version__ = "1.0.0"
