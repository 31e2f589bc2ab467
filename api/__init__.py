"""API package - Request/response schemas and dependencies."""
