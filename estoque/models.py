# estoque/models.py
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import INVALID_NAME, INVALID_PRICE, INVALID_QUANTITY


class ProductDraft(BaseModel):
    """
    A product payload that has not been given an id yet.

    Fields are declared in rule order (nome, quantidade, preco) so the first
    reported error is the first failing rule.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="nome")
    quantity: int = Field(alias="quantidade")
    price: float = Field(alias="preco")

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, v: Any) -> str:
        if not isinstance(v, str) or not v:
            raise ValueError(INVALID_NAME)
        return v

    @field_validator("quantity", mode="before")
    @classmethod
    def check_quantity(cls, v: Any) -> int:
        # ints, integral floats and strings holding an integral number
        if isinstance(v, bool):
            raise ValueError(INVALID_QUANTITY)
        if isinstance(v, str):
            raw = v.strip()
            try:
                v = int(raw)
            except ValueError:
                try:
                    v = float(raw)
                except ValueError:
                    raise ValueError(INVALID_QUANTITY)
        if isinstance(v, float):
            if not math.isfinite(v) or not v.is_integer():
                raise ValueError(INVALID_QUANTITY)
            v = int(v)
        if not isinstance(v, int) or v < 0:
            raise ValueError(INVALID_QUANTITY)
        return v

    @field_validator("price", mode="before")
    @classmethod
    def check_price(cls, v: Any) -> float:
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(INVALID_PRICE)
        try:
            v = float(v)
        except OverflowError:
            raise ValueError(INVALID_PRICE)
        if not math.isfinite(v) or v < 0:
            raise ValueError(INVALID_PRICE)
        return v


class ProductPatch(BaseModel):
    """Fields sent on update; checked only once merged with the stored record."""
    model_config = ConfigDict(populate_by_name=True)

    name: Any = Field(None, alias="nome")
    quantity: Any = Field(None, alias="quantidade")
    price: Any = Field(None, alias="preco")


class Product(ProductDraft):
    id: int

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True)
