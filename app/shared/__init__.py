"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error handling and mapping
- Response envelopes
- Request logging middleware
- Rate limiting
- Logging configuration
"""
