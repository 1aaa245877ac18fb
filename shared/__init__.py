"""
Shared code for the Hello Relay platform
"""
