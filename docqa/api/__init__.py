"""
API routes module.

FastAPI application, routers and dependencies for the HTTP surface.
"""
