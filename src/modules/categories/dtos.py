"""Category DTOs for the Service Layer.

Immutable pydantic models built by the views from the request body.
Validators raise ``PydanticCustomError`` so the first error message is
exactly the one returned to the client.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


class CreateCategoryDTO(BaseModel):
    """Input for category creation.  ``name`` is required."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def name_is_required(cls, v: Any) -> Any:
        if not v:
            raise PydanticCustomError("name_required", "Category name is required")
        return v


class UpdateCategoryDTO(BaseModel):
    """Input for category updates.

    ``name`` is applied as given whenever the key is present in the body;
    an absent key leaves the stored name untouched.
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None

    @property
    def has_name(self) -> bool:
        return "name" in self.model_fields_set
