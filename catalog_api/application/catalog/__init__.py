"""
Application layer for the catalog bounded context.

Use cases coordinate domain entities and ports.
No framework or infrastructure imports allowed.
"""
