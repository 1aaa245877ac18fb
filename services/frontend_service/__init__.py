"""
Frontend Service
Serves the hello page and proxies its request to the hello service
"""
