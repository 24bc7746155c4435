"""
Shared module package.

Contains cross-cutting concerns used across resource routers:
- Outcome classification and fault handling
- Security middleware
- Rate limiting
- Logging configuration
"""
