"""
Services of the Hello Relay platform
"""
