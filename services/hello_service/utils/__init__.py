"""
Utility modules for hello service
"""
