"""API schemas for request/response serialization.

Provides the response envelope models and the FastAPI dependencies that run
request payloads through their validation schemas.
"""
