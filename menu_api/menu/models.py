from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    APPETIZER = "appetizer"
    ENTREE = "entree"
    DESSERT = "dessert"
    BEVERAGE = "beverage"


class MenuItemCreate(BaseModel):
    """Create payload; field rules are checked in ``menu_api.menu.validation``."""

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str
    price: float
    category: Category
    ingredients: list[str]
    available: bool | None = None


class MenuItemUpdate(BaseModel):
    """Partial update; only fields explicitly set are applied."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    description: str | None = None
    price: float | None = None
    category: Category | None = None
    ingredients: list[str] | None = None
    available: bool | None = None

    def present_fields(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class MenuItem(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    id: int = Field(..., ge=1)
    name: str = Field(..., min_length=3)
    description: str = Field(..., min_length=10)
    price: float = Field(..., gt=0)
    category: Category
    ingredients: list[str] = Field(..., min_length=1)
    available: bool | None = None
