"""
World Service
Terminal service producing the payload relayed by the hello service
"""
