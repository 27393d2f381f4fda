"""
API layer for the Users API.

Exposes HTTP endpoints under /v1 (users CRUD and login) plus health routes.
"""
