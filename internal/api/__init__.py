"""
HTTP layer.
Routers, request/response schemas and error rendering helpers.
"""
