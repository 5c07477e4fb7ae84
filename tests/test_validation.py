# tests/test_validation.py
import pytest

from estoque.core import first_error_message, merge_for_update, parse_product_id, validate_draft
from estoque.errors import INVALID_JSON, INVALID_NAME, INVALID_PRICE, INVALID_QUANTITY, NotFoundError, ValidationError
from estoque.models import Product, ProductPatch


def error_of(payload):
    with pytest.raises(ValidationError) as exc:
        validate_draft(payload)
    return exc.value.message


def test_valid_draft():
    d = validate_draft({"nome": "Caderno", "quantidade": 3, "preco": 9.5})
    assert (d.name, d.quantity, d.price) == ("Caderno", 3, 9.5)


def test_whitespace_name_is_text():
    assert validate_draft({"nome": "   ", "quantidade": 1, "preco": 1}).name == "   "


@pytest.mark.parametrize("nome", [None, "", 5, ["a"]])
def test_invalid_name(nome):
    payload = {"quantidade": 1, "preco": 1.0}
    if nome is not None:
        payload["nome"] = nome
    assert error_of(payload) == INVALID_NAME


@pytest.mark.parametrize("quantidade", [None, -1, 1.5, "abc", "", True, float("inf"), "1e400"])
def test_invalid_quantity(quantidade):
    payload = {"nome": "x", "preco": 1.0}
    if quantidade is not None:
        payload["quantidade"] = quantidade
    assert error_of(payload) == INVALID_QUANTITY


@pytest.mark.parametrize("raw,expected", [(0, 0), ("3", 3), (" 7 ", 7), (4.0, 4), ("2.0", 2)])
def test_quantity_conversion(raw, expected):
    assert validate_draft({"nome": "x", "quantidade": raw, "preco": 1}).quantity == expected


@pytest.mark.parametrize("preco", [None, -0.01, "9.5", False, float("nan"), 10 ** 400])
def test_invalid_price(preco):
    payload = {"nome": "x", "quantidade": 1}
    if preco is not None:
        payload["preco"] = preco
    assert error_of(payload) == INVALID_PRICE


def test_free_product_is_valid():
    assert validate_draft({"nome": "Brinde", "quantidade": 0, "preco": 0}).price == 0.0


def test_first_failing_rule_wins():
    assert error_of({"nome": "", "quantidade": -1, "preco": -1}) == INVALID_NAME
    assert error_of({"nome": "x", "quantidade": -1, "preco": -1}) == INVALID_QUANTITY
    assert error_of({}) == INVALID_NAME


def test_non_object_payload():
    assert error_of([1, 2]) == INVALID_JSON


def test_first_error_message_for_body_errors():
    assert first_error_message([{"loc": ("body", 3), "type": "json_invalid"}]) == INVALID_JSON
    assert first_error_message([{"loc": ("body", "preco")}, {"loc": ("body", "nome")}]) == INVALID_PRICE


def test_merge_for_update_keeps_unspecified_fields():
    current = Product(id=3, name="Régua", quantity=2, price=4.0)
    d = merge_for_update(current, ProductPatch.model_validate({"preco": 12, "id": 99}))
    assert (d.name, d.quantity, d.price) == ("Régua", 2, 12.0)


def test_merge_for_update_validates_result():
    current = Product(id=3, name="Régua", quantity=2, price=4.0)
    with pytest.raises(ValidationError) as exc:
        merge_for_update(current, ProductPatch.model_validate({"quantidade": -5}))
    assert exc.value.message == INVALID_QUANTITY


def test_parse_product_id():
    assert parse_product_id("12") == 12
    with pytest.raises(NotFoundError):
        parse_product_id("abc")
