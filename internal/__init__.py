"""
Internal package.
Contains the HTTP API: routes, schemas and response helpers.
"""
