#!/usr/bin/env python
from sdk.productclient import ProductClient


def main():
    c = ProductClient(base_url="http://127.0.0.1:3000", graphql_url="http://127.0.0.1:4000/graphql")

    # -----------------------------
    # Reset to the seed records
    # -----------------------------
    print("Resetting store...")
    print(c.reset())

    # -----------------------------
    # Both APIs see the same data
    # -----------------------------
    print("\nProducts via GraphQL...")
    print(c.gql_products())

    print("\nCreating 'Cap' via GraphQL...")
    cap = c.gql_create_product("Cap", 9.99)
    print(cap)

    print("\nReading it back via REST...")
    print(c.get_product(cap["id"]))

    print("\nCreating 'Socks' via REST...")
    socks = c.create_product("Socks", 4.5, "Wool socks", 0.45)
    print(socks)

    print("\nReading it back via GraphQL...")
    print(c.gql_product(socks["id"]))

    print("\nAll products via REST...")
    print(c.list_products())

    print("\nMissing product:", c.get_product(999999))


if __name__ == "__main__":
    main()
