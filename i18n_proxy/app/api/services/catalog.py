from i18n_proxy.app.catalog.schema import (
    CatalogStatus,
    CatalogStatusSchema,
    CategorySummarySchema,
    ProductReadSchema,
)
from i18n_proxy.app.core.logging import get_logger

logger = get_logger()

# Catalogue content is authored in the native language
PRODUCTS = [
    ProductReadSchema(sku="FRN-001", name="Oak Chair", category="Furniture", color="Brown", price=89.0),
    ProductReadSchema(sku="FRN-002", name="Oak Table", category="Furniture", color="Brown", price=249.0),
    ProductReadSchema(sku="FRN-003", name="Red Sofa", category="Furniture", color="Red", price=799.0, in_stock=False),
    ProductReadSchema(sku="LGT-001", name="Desk Lamp", category="Lighting", color="Black", price=35.5),
    ProductReadSchema(sku="LGT-002", name="Floor Lamp", category="Lighting", color="White", price=120.0),
    ProductReadSchema(sku="TXT-001", name="Wool Rug", category="Textiles", color="Red", price=150.0),
]


class CatalogService:
    def __init__(self, products: list[ProductReadSchema]):
        self._products = list(products)

    def get_product(self, sku: str) -> ProductReadSchema | None:
        for product in self._products:
            if product.sku == sku:
                return product
        return None

    def summarize_category(self, category: str) -> CategorySummarySchema:
        skus = [p.sku for p in self._products if p.category == category]
        return CategorySummarySchema(category=category, product_count=len(skus), skus=skus)

    def search(self, filters: dict[str, str]) -> list[ProductReadSchema]:
        """
        Products whose attributes equal every filter value.

        Unknown attribute names match nothing.
        """
        matches = []
        for product in self._products:
            values = product.model_dump()
            if all(str(values.get(key)) == value for key, value in filters.items()):
                matches.append(product)
        logger.debug(f"Catalog search {filters} matched {len(matches)} products")
        return matches

    def status(self) -> CatalogStatus:
        available = [p for p in self._products if p.in_stock]
        return CatalogStatus(
            state=CatalogStatusSchema.OPEN,
            product_count=len(available),
            notice="The catalog is open",
        )


catalog_service = CatalogService(PRODUCTS)
