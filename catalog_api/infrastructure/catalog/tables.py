"""
Table definitions for the catalog schema.
"""

from sqlalchemy import Column, Float, Integer, MetaData, String, Table, Text

metadata = MetaData()

locations = Table(
    "locations",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(200), nullable=False),
    Column("address", String(300)),
    Column("city", String(100)),
    Column("state", String(50)),
    Column("zip_code", String(10), nullable=False, index=True),
    Column("latitude", Float, nullable=False),
    Column("longitude", Float, nullable=False),
)

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(200), nullable=False),
    Column("brand", String(200)),
    Column("category", String(100)),
    Column("description", Text),
    Column("image_url", String(500)),
)

# Review ids are never reused, even after the newest review is deleted.
reviews = Table(
    "reviews",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("product_id", Integer, nullable=False, index=True),
    Column("reviewer", String(100), nullable=False),
    Column("rating", Integer, nullable=False),
    Column("content", Text, nullable=False),
    sqlite_autoincrement=True,
)
