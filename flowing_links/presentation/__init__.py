"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- dependencies/: caller identity resolution for routes
- middleware/: correlation id, request logging, security headers
"""
