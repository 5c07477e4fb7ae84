import asyncio
import os

from sdk.estoque import EstoqueClient, EstoqueError


async def create(client, n):
    try:
        p = await client.create_product_async(f"Lote {n}", n, 1.0 + n)
        print(f"✅ created {p['nome']} with id {p['id']}")
        return p["id"]
    except EstoqueError as e:
        print(f"❌ Lote {n} failed: {e}")
    except Exception as e:
        print(f"❌ Lote {n} unexpected failure: {e}")
    return None


async def main():
    c = EstoqueClient(base_url=os.environ.get("ESTOQUE_URL", "http://127.0.0.1:3000"))

    print("\n⚡ Creating products concurrently...")
    ids = await asyncio.gather(*(create(c, n) for n in range(1, 11)))
    ids = [i for i in ids if i is not None]

    # every create must have received its own id
    if len(ids) == len(set(ids)):
        print(f"\n📦 {len(ids)} products, all ids distinct: {sorted(ids)}")
    else:
        print(f"\n⚠️  duplicate ids assigned: {sorted(ids)}")

    for pid in ids:
        c.delete_product(pid)


if __name__ == "__main__":
    asyncio.run(main())
