"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2, built by the
views from the raw request body.  DTOs are immutable (``frozen=True``)
and accept the API's camelCase ``categoryId`` as well as ``category_id``.

- ``CreateProductDTO``: input for product creation.  Fields are checked in
  declaration order, so the first error is the one reported to the client.
- ``UpdateProductDTO``: input for partial product updates.  Only keys
  present in the body are written.

Validators raise ``PydanticCustomError`` so ``errors()[0]["msg"]`` is the
exact client-facing message.
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_core import PydanticCustomError

# Fields an update may write, in model-attribute names.
UPDATABLE_FIELDS = ("description", "price", "currency", "quantity", "active", "category_id")


def _invalid_price() -> PydanticCustomError:
    return PydanticCustomError("price_invalid", "Valid product price is required")


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates, in order:
    - ``name`` is present and non-empty.
    - ``price`` is present, numeric, finite and greater than zero.
    - ``categoryId`` is present.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: Optional[str] = Field(default=None, validate_default=True)
    price: Optional[float] = Field(default=None, validate_default=True)
    category_id: Optional[Union[int, str]] = Field(
        default=None, alias="categoryId", validate_default=True
    )
    description: Optional[str] = None
    currency: Optional[str] = None
    quantity: Optional[int] = None
    active: Optional[bool] = None

    @field_validator("name", mode="before")
    @classmethod
    def name_is_required(cls, v: Any) -> Any:
        if not v:
            raise PydanticCustomError("name_required", "Product name is required")
        return v

    @field_validator("price", mode="before")
    @classmethod
    def price_must_be_positive(cls, v: Any) -> float:
        if v is None or isinstance(v, bool) or v == "":
            raise _invalid_price()
        try:
            price = float(str(v).strip())
        except ValueError:
            raise _invalid_price() from None
        if not math.isfinite(price) or price <= 0:
            raise _invalid_price()
        return price

    @field_validator("category_id", mode="before")
    @classmethod
    def category_id_is_required(cls, v: Any) -> Any:
        if not v:
            raise PydanticCustomError("category_required", "Category ID is required")
        return v

    def optional_fields(self) -> Dict[str, Any]:
        """Optional attributes the caller actually sent."""
        return self.model_dump(
            include={"description", "currency", "quantity", "active"},
            exclude_unset=True,
        )


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    All fields are optional at this level; the only cross-field rule is
    that ``price`` and ``quantity`` may not both be negative.  The Service
    Layer enforces the remaining checks (category, id, name) in order.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(default=None, allow_inf_nan=False)
    currency: Optional[str] = None
    quantity: Optional[int] = None
    active: Optional[bool] = None
    category_id: Optional[Union[int, str]] = Field(default=None, alias="categoryId")

    @model_validator(mode="after")
    def price_and_quantity_not_both_negative(self) -> "UpdateProductDTO":
        if (
            self.price is not None
            and self.quantity is not None
            and self.price < 0
            and self.quantity < 0
        ):
            raise PydanticCustomError(
                "negative_values", "Price and quantity cannot be negative"
            )
        return self

    def changes(self) -> Dict[str, Any]:
        """Updatable attributes present in the request body."""
        return self.model_dump(include=set(UPDATABLE_FIELDS), exclude_unset=True)
