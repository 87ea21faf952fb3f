"""
HTTP surface.

Routers for health, hello, users and the catch-all echo, their
Pydantic schemas and the dependency providers that wire services
into routes.
"""
