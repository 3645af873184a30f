"""
OpenChat Backend - root package.

This package contains the FastAPI app entry point (main.py), API routes,
the authentication and message use cases, and their MongoDB / in-memory
storage.
"""
