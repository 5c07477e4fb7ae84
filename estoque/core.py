# estoque/core.py
from typing import Any, Mapping, Sequence

from pydantic import ValidationError as SchemaError

from .errors import (
    INVALID_JSON,
    INVALID_NAME,
    INVALID_PRICE,
    INVALID_QUANTITY,
    NotFoundError,
    ValidationError,
)
from .models import Product, ProductDraft, ProductPatch

_FIELD_MESSAGES = {
    "nome": INVALID_NAME,
    "name": INVALID_NAME,
    "quantidade": INVALID_QUANTITY,
    "quantity": INVALID_QUANTITY,
    "preco": INVALID_PRICE,
    "price": INVALID_PRICE,
}


def first_error_message(errors: Sequence[Mapping[str, Any]]) -> str:
    """
    Message for the first pydantic error. Errors come in field order, so this
    is the first failing rule; errors not tied to a field mean a bad body.
    """
    for err in errors[:1]:
        for part in err.get("loc", ()):
            if part in _FIELD_MESSAGES:
                return _FIELD_MESSAGES[part]
    return INVALID_JSON


def validate_draft(payload: Any) -> ProductDraft:
    try:
        return ProductDraft.model_validate(payload)
    except SchemaError as e:
        raise ValidationError(first_error_message(e.errors()))


def merge_for_update(current: Product, patch: ProductPatch) -> ProductDraft:
    """
    Overlay the fields present in the patch on the current record and
    validate the result. The stored id never changes.
    """
    merged = current.to_json()
    merged.update(patch.model_dump(by_alias=True, exclude_unset=True))
    return validate_draft(merged)


def parse_product_id(raw: str) -> int:
    # a segment that is not an integer cannot name any product
    try:
        return int(raw)
    except ValueError:
        raise NotFoundError()
