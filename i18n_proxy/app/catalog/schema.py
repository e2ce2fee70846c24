from enum import Enum
from typing import Annotated
from sqlmodel import SQLModel, Field
from i18n_proxy.app.translation.markers import Translatable, translatable


class CatalogStatusSchema(str, Enum):
    OPEN = "open"
    CLOSED = "closed"
    MAINTENANCE = "maintenance"


class ProductReadSchema(SQLModel):
    sku: str = Field(max_length=12)
    name: Annotated[str, Translatable()]
    category: Annotated[str, Translatable()]
    color: Annotated[str, Translatable()]
    price: float = Field(gt=0)
    in_stock: bool = True


class CategorySummarySchema(SQLModel):
    category: str
    product_count: int = Field(ge=0)
    skus: list[str] = []


class WelcomeSchema(SQLModel):
    message: str
    version: str


class CatalogStatus:
    """Live view over the catalogue, read through its accessors."""

    def __init__(self, state: CatalogStatusSchema, product_count: int, notice: str):
        self._state = state
        self._product_count = product_count
        self._notice = notice

    @translatable
    def get_message(self) -> str:
        return self._notice

    def get_product_count(self) -> int:
        return self._product_count

    def status(self) -> str:
        return self._state.value
