"""
Core app - Process-level tooling shared by the service.

Provides management commands for:
- Serving the ASGI application (serve)
- Seeding sample tasks for local development (seed)
"""
