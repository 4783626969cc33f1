#!/usr/bin/env python
import os

from sdk.products import ProductAPIError, ProductClient


def main():
    c = ProductClient(
        base_url=os.getenv("PRODUCT_API_URL", "http://127.0.0.1:3000"),
        api_key=os.getenv("API_KEY", "dev-secret-key"),
    )

    print(c.welcome())

    # -----------------------------
    # Seed data
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    print("\nStats...")
    print(c.get_stats())

    # -----------------------------
    # Create
    # -----------------------------
    print("\nCreating a product...")
    kettle = c.create_product("Electric Kettle", "1.7L, auto shut-off", 35, "kitchen", True)
    print(kettle)

    # -----------------------------
    # Filter / search / paginate
    # -----------------------------
    print("\nKitchen products...")
    print(c.list_products(category="kitchen"))

    print("\nSearching for 'kettle'...")
    print(c.list_products(q="kettle"))

    print("\nFirst page, two per page...")
    print(c.list_products(page=1, limit=2))

    # -----------------------------
    # Update / delete
    # -----------------------------
    print("\nMarking it out of stock...")
    print(c.update_product(kettle["id"], in_stock=False))

    print("\nDeleting it...")
    print(c.delete_product(kettle["id"]))

    try:
        c.get_product(kettle["id"])
    except ProductAPIError as e:
        print(f"\nFetching it again: {e}")


if __name__ == "__main__":
    main()
