"""
Adapter: Product repository.

Implements ProductRepository port over the ``products`` table.
"""

from typing import Any

from sqlalchemy import text as sql_text

from catalog_api.domain.catalog.entities import Product
from catalog_api.domain.catalog.outcome import NotFound, Ok, Outcome
from catalog_api.domain.catalog.ports import ProductRepository
from catalog_api.infrastructure.database import SqlRepository

_SELECT_PRODUCTS = (
    "SELECT id, name, brand, category, description, image_url FROM products"
)


def _row_to_product(row: Any) -> Product:
    return Product(
        id=row["id"],
        name=row["name"],
        brand=row["brand"],
        category=row["category"],
        description=row["description"],
        image_url=row["image_url"],
    )


class SqlProductRepository(SqlRepository, ProductRepository):
    """Products from the ``products`` table."""

    async def list_all(self) -> Outcome[list[Product]]:
        return await self._run(self._list_all)

    async def get(self, product_id: int) -> Outcome[Product]:
        return await self._run(self._get, product_id)

    def _list_all(self) -> Outcome[list[Product]]:
        with self._engine.connect() as conn:
            rows = conn.execute(sql_text(f"{_SELECT_PRODUCTS} ORDER BY id")).mappings().all()
        return Ok([_row_to_product(row) for row in rows])

    def _get(self, product_id: int) -> Outcome[Product]:
        with self._engine.connect() as conn:
            row = conn.execute(
                sql_text(f"{_SELECT_PRODUCTS} WHERE id = :id"), {"id": product_id}
            ).mappings().first()
        if row is None:
            return NotFound(f"Product {product_id} does not exist")
        return Ok(_row_to_product(row))
