"""
API routes for hello service
"""

from . import health, hello

__all__ = ["health", "hello"]
