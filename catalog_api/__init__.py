"""
Catalog API: product, store-location and review query service.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - catalog: Reviews, store locations, products and proximity search.

Layers:
    - domain: Entities, outcomes, geo math, ports (ABCs), errors.
    - application: Use cases (radius queries).
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
