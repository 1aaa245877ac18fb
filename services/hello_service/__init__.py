"""
Hello Service
Relays each request to the world service and greets its answer
"""
