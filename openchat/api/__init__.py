"""
API layer for OpenChat.

Exposes HTTP endpoints under /api/v1 (auth, messages, greeting).
"""
