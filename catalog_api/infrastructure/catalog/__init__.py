"""
Catalog infrastructure adapters (SQLAlchemy repositories).
"""
