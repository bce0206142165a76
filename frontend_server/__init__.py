"""
Frontend delivery server.

This package provides a small FastAPI application that serves a built
single-page application, advertises the backend API location to the client
and answers health checks.
"""
