"""
Shared data schemas for the Hello Relay platform

This package contains common data schemas used across all services.
"""

from .hello import ErrorResponse, HelloPageState, HelloResult

__all__ = [
    "ErrorResponse",
    "HelloPageState",
    "HelloResult",
]

__version__ = "1.0.0"
