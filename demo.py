#!/usr/bin/env python
import os

from sdk.estoque import EstoqueClient, EstoqueError


def main():
    c = EstoqueClient(base_url=os.environ.get("ESTOQUE_URL", "http://127.0.0.1:3000"))

    # -----------------------------
    # Create a product
    # -----------------------------
    print("Creating product...")
    prod = c.create_product("X", 3, 9.5)
    print(prod)
    pid = prod["id"]

    # -----------------------------
    # List products
    # -----------------------------
    print("\nListing products...")
    print(c.list_products())

    # -----------------------------
    # Partial update: only the price changes
    # -----------------------------
    print(f"\nUpdating price of product {pid}...")
    print(c.update_product(pid, preco=12))

    # -----------------------------
    # Rejected update
    # -----------------------------
    print("\nTrying a negative quantity...")
    try:
        c.update_product(pid, quantidade=-1)
    except EstoqueError as e:
        print(f"rejected: {e.status_code} {e.message}")

    # -----------------------------
    # Delete and look it up again
    # -----------------------------
    print(f"\nDeleting product {pid}...")
    c.delete_product(pid)
    try:
        c.get_product(pid)
    except EstoqueError as e:
        print(f"lookup after delete: {e.status_code} {e.message}")


if __name__ == "__main__":
    main()
