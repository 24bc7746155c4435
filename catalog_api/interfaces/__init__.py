"""
Interfaces layer package.

Contains FastAPI routers and Pydantic request/response schemas.
No business logic belongs here.
"""
