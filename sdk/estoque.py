# sdk/estoque.py
import os
from typing import Any, Dict, List, Optional

import httpx
import requests
from rich import print

API_PATH = "/api/produtos"


class EstoqueError(Exception):
    """Raised for any non-2xx answer from the inventory API."""

    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _error_message(r) -> str:
    try:
        body = r.json()
    except ValueError:
        return r.text or "erro desconhecido"
    if isinstance(body, dict):
        return str(body.get("error") or body.get("detail") or body)
    return str(body)


def _draft(nome: Optional[str] = None, quantidade: Optional[Any] = None, preco: Optional[Any] = None) -> Dict[str, Any]:
    payload = {"nome": nome, "quantidade": quantidade, "preco": preco}
    return {k: v for k, v in payload.items() if v is not None}


class EstoqueClient:
    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: int = 10,
        session=None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.async_transport = async_transport

    def _url(self, product_id: Optional[int] = None) -> str:
        url = f"{self.base_url}{API_PATH}"
        if product_id is not None:
            url += f"/{product_id}"
        return url

    @staticmethod
    def _check(r):
        if r.status_code >= 400:
            raise EstoqueError(r.status_code, _error_message(r))
        return r

    def list_products(self) -> List[Dict[str, Any]]:
        r = self._check(self.session.get(self._url(), timeout=self.timeout))
        return r.json()

    def get_product(self, product_id: int) -> Dict[str, Any]:
        r = self._check(self.session.get(self._url(product_id), timeout=self.timeout))
        # GET by id wraps the record in {"success": true, "data": ...}
        return r.json()["data"]

    def create_product(self, nome: str, quantidade: int, preco: float) -> Dict[str, Any]:
        r = self.session.post(self._url(), json=_draft(nome, quantidade, preco), timeout=self.timeout)
        return self._check(r).json()

    def update_product(self, product_id: int, **fields) -> Dict[str, Any]:
        """Partial update: only the given fields (nome, quantidade, preco) are sent."""
        r = self.session.put(self._url(product_id), json=_draft(**fields), timeout=self.timeout)
        return self._check(r).json()

    def delete_product(self, product_id: int) -> None:
        self._check(self.session.delete(self._url(product_id), timeout=self.timeout))

    # Async create (used by the concurrent demo)
    async def create_product_async(self, nome: str, quantidade: int, preco: float) -> Dict[str, Any]:
        async with httpx.AsyncClient(
            base_url=self.base_url, transport=self.async_transport, timeout=self.timeout
        ) as client:
            r = await client.post(API_PATH, json=_draft(nome, quantidade, preco))
            return self._check(r).json()


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Estoque CLI")
    parser.add_argument("--url", default=os.environ.get("ESTOQUE_URL", "http://127.0.0.1:3000"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List all products")

    gp = subparsers.add_parser("get", help="Get a product by its ID")
    gp.add_argument("--id", type=int, required=True, help="ID of the product")

    cp = subparsers.add_parser("create", help="Create a new product")
    cp.add_argument("--nome", required=True, help="Product name")
    cp.add_argument("--quantidade", type=int, required=True, help="Quantity in stock")
    cp.add_argument("--preco", type=float, required=True, help="Unit price")

    up = subparsers.add_parser("update", help="Update some fields of a product")
    up.add_argument("--id", type=int, required=True, help="ID of the product")
    up.add_argument("--nome", help="Product name")
    up.add_argument("--quantidade", type=int, help="Quantity in stock")
    up.add_argument("--preco", type=float, help="Unit price")

    dp = subparsers.add_parser("delete", help="Delete a product")
    dp.add_argument("--id", type=int, required=True, help="ID of the product")

    args = parser.parse_args()
    c = EstoqueClient(base_url=args.url)

    try:
        if args.command == "list":
            print(c.list_products())
        elif args.command == "get":
            print(c.get_product(args.id))
        elif args.command == "create":
            print(c.create_product(args.nome, args.quantidade, args.preco))
        elif args.command == "update":
            print(c.update_product(args.id, nome=args.nome, quantidade=args.quantidade, preco=args.preco))
        elif args.command == "delete":
            c.delete_product(args.id)
            print(f"[green]Product {args.id} deleted[/green]")
    except EstoqueError as e:
        print(f"[red]{e}[/red]")
        raise SystemExit(1)
