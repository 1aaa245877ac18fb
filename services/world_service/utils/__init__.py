"""
Utility modules for world service
"""
