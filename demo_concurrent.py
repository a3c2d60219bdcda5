import asyncio
from sdk.productclient import ProductClient


async def main():
    c = ProductClient(base_url="http://127.0.0.1:3000")
    c.reset()

    names = [f"Sticker #{i}" for i in range(1, 11)]
    print(f"\n⚡ Creating {len(names)} products concurrently...")
    created = await asyncio.gather(*(c.create_product_async(n, 1.0 + i) for i, n in enumerate(names)))

    ids = [p["id"] for p in created]
    print("ids assigned:", sorted(ids))
    print("all distinct:", len(set(ids)) == len(ids))
    print("📦 total products:", len(c.list_products()))


if __name__ == "__main__":
    asyncio.run(main())
