# tests/test_sdk.py
import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from estoque.database import ProductStore
from estoque.main import create_app
from sdk.estoque import EstoqueClient, EstoqueError


def new_sdk():
    app = create_app(store=ProductStore())
    return EstoqueClient(
        base_url="http://testserver",
        session=TestClient(app),
        async_transport=httpx.ASGITransport(app=app),
    )


def test_crud_through_sdk():
    c = new_sdk()
    p = c.create_product("Borracha", 8, 0.75)
    assert p["id"] == 1
    assert c.list_products() == [p]
    assert c.get_product(1) == p

    updated = c.update_product(1, quantidade=6)
    assert updated["quantidade"] == 6
    assert updated["nome"] == "Borracha"

    c.delete_product(1)
    assert c.list_products() == []


def test_errors_carry_status_and_message():
    c = new_sdk()
    with pytest.raises(EstoqueError) as exc:
        c.get_product(3)
    assert exc.value.status_code == 404
    assert exc.value.message == "Produto não encontrado"

    with pytest.raises(EstoqueError) as exc:
        c.create_product("", 1, 1.0)
    assert exc.value.status_code == 400
    assert exc.value.message == "Nome inválido"

    with pytest.raises(EstoqueError) as exc:
        c.delete_product(3)
    assert exc.value.status_code == 404


def test_async_create():
    c = new_sdk()
    p = asyncio.run(c.create_product_async("Clipe", 100, 0.05))
    assert p["id"] == 1
    assert c.get_product(1)["nome"] == "Clipe"
