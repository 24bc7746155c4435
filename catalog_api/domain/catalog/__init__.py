"""
Catalog bounded context: domain layer.

- Reviews (full lifecycle)
- Store locations and proximity math
- Products (read-only reference data)
"""
