# tests/test_store.py
import pytest

from estoque.database import ProductStore, demo_products
from estoque.errors import NotFoundError
from estoque.models import Product, ProductDraft


def draft(name="Caneta", quantity=1, price=2.5):
    return ProductDraft(name=name, quantity=quantity, price=price)


def test_ids_start_at_one_and_follow_creation_order():
    store = ProductStore()
    ids = [store.create(draft(f"p{i}")).id for i in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert [p.name for p in store.list()] == ["p0", "p1", "p2", "p3", "p4"]


def test_new_id_is_max_plus_one():
    store = ProductStore()
    for i in range(3):
        store.create(draft(f"p{i}"))
    # deleting a middle id does not free it
    store.delete(2)
    assert store.create(draft()).id == 4
    # deleting the maximum lets it come back
    store.delete(4)
    assert store.create(draft()).id == 4


def test_emptied_store_restarts_at_one():
    store = ProductStore()
    store.create(draft())
    store.delete(1)
    assert len(store) == 0
    assert store.create(draft()).id == 1


def test_seeded_store_keeps_ids():
    store = ProductStore([Product(id=5, name="a", quantity=1, price=1), Product(id=2, name="b", quantity=1, price=1)])
    assert [p.id for p in store.list()] == [5, 2]
    assert store.create(draft()).id == 6


def test_seed_rejects_duplicate_ids():
    with pytest.raises(ValueError):
        ProductStore([Product(id=1, name="a", quantity=1, price=1), Product(id=1, name="b", quantity=1, price=1)])


def test_demo_products():
    store = ProductStore(demo_products())
    assert [p.name for p in store.list()] == ["Produto A", "Produto B"]
    assert store.get(2).price == 20.50


def test_get_returns_a_copy():
    store = ProductStore()
    store.create(draft(quantity=3))
    p = store.get(1)
    p.quantity = 99
    assert store.get(1).quantity == 3


def test_get_missing_raises():
    with pytest.raises(NotFoundError):
        ProductStore().get(1)


def test_update_merges_and_keeps_id():
    store = ProductStore()
    store.create(draft("Lápis", 4, 1.0))
    p = store.update(1, {"price": 1.5, "id": 42, "color": "blue"})
    assert p.id == 1
    assert (p.name, p.quantity, p.price) == ("Lápis", 4, 1.5)
    assert 42 not in store
    assert store.get(1).price == 1.5


def test_update_missing_raises():
    with pytest.raises(NotFoundError):
        ProductStore().update(7, {"name": "x"})


def test_delete_missing_leaves_store_unchanged():
    store = ProductStore()
    store.create(draft())
    with pytest.raises(NotFoundError):
        store.delete(9)
    assert len(store) == 1
    assert 1 in store
