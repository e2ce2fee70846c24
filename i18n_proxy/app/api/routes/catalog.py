from typing import Annotated
from fastapi import APIRouter, Query, status
from i18n_proxy.app.api.services.catalog import catalog_service
from i18n_proxy.app.catalog.schema import CategorySummarySchema, ProductReadSchema
from i18n_proxy.app.core.logging import get_logger
from i18n_proxy.app.core.translation import interceptor
from i18n_proxy.app.translation.markers import TranslatableRegex, TranslatableString
from i18n_proxy.app.translation.responses import EntityResponse

logger = get_logger()

router = APIRouter(prefix="/catalog", tags=["Catalog"])

# "color:Red,category:Furniture" -> values "Red" and "Furniture" are translated
FILTER_PATTERN = r"(\w+):([^,]+)"


def parse_filters(filters: str) -> dict[str, str]:
    parsed = {}
    for entry in filters.split(","):
        key, sep, value = entry.partition(":")
        if sep and key.strip():
            parsed[key.strip()] = value.strip()
    return parsed


@router.get("/categories/{category}", response_model=CategorySummarySchema)
@interceptor.i18n
async def get_category(category: Annotated[str, TranslatableString()]):
    """
    Summarize one category.

    - **category**: Category name in the caller's language.
    """
    summary = catalog_service.summarize_category(category)
    return EntityResponse(summary)


@router.get("/search", response_model=ProductReadSchema)
@interceptor.i18n
async def search_products(
    filters: Annotated[
        str, Query(), TranslatableRegex(FILTER_PATTERN, target_groups=(2,), delimiter=",")
    ],
):
    """
    Return the first product matching every ``attribute:value`` filter.

    - **filters**: Comma separated filters, values in the caller's language.
    """
    matches = catalog_service.search(parse_filters(filters))
    if not matches:
        logger.info(f"No product matches filters: {filters}")
        return EntityResponse(None, status_code=status.HTTP_404_NOT_FOUND)
    return EntityResponse(matches[0])


@router.get("/products/{sku}", response_model=ProductReadSchema)
@interceptor.i18n
async def get_product(sku: str):
    product = catalog_service.get_product(sku)
    if product is None:
        return EntityResponse(None, status_code=status.HTTP_404_NOT_FOUND)
    return EntityResponse(product)


@router.get("/status")
@interceptor.i18n
async def get_status():
    return EntityResponse(catalog_service.status())
