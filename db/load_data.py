"""
Load store locations and products from CSV files into the catalog database.

Creates missing tables first, then appends the rows.

Usage:
    python db/load_data.py --locations data/locations.csv --products data/products.csv

Expected headers:
    locations: name,address,city,state,zip_code,latitude,longitude
    products:  name,brand,category,description,image_url
"""

import argparse
import sys
from pathlib import Path

from catalog_api.core.config import settings
from catalog_api.infrastructure.catalog.seed import load_locations, load_products
from catalog_api.infrastructure.database import build_engine, create_schema


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed catalog reference data.")
    parser.add_argument("--locations", type=Path, help="CSV file of store locations")
    parser.add_argument("--products", type=Path, help="CSV file of products")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL (defaults to the configured database)",
    )
    args = parser.parse_args()

    if not args.locations and not args.products:
        parser.error("nothing to load: pass --locations and/or --products")

    for path in (args.locations, args.products):
        if path and not path.is_file():
            print(f"[ERROR] File not found: {path}")
            sys.exit(1)

    engine = build_engine(args.database_url or settings.get_database_url())
    print(f"Connecting to {engine.url.render_as_string(hide_password=True)}...")
    create_schema(engine)

    if args.locations:
        inserted, skipped = load_locations(engine, args.locations)
        print(f"[OK] Locations inserted: {inserted}, skipped: {skipped}")
    if args.products:
        inserted, skipped = load_products(engine, args.products)
        print(f"[OK] Products inserted: {inserted}, skipped: {skipped}")

    engine.dispose()
    print("\n[OK] Done!")


if __name__ == "__main__":
    main()
