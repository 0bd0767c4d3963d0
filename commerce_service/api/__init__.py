"""
HTTP API of the commerce service.
"""
