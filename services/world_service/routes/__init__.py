"""
API routes for world service
"""

from . import world

__all__ = ["world"]
