"""
Users API — root package.

This package contains the FastAPI app entry point (main.py), API routes,
the user validation rules, and the in-memory user store.
"""
