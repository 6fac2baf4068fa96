# supplyhub/services/catalog.py
from dataclasses import dataclass, field
from typing import Iterable, List, Literal

from supplyhub.domain.errors import MarketplaceError
from supplyhub.domain.schemas import CatalogQuery, Product
from supplyhub.services.product_service import ProductService
from supplyhub.utils.logging import get_logger

logger = get_logger(__name__)

ViewStatus = Literal["loading", "ready", "error"]


def _matches_search(product: Product, needle: str) -> bool:
    return (
        needle in product.name.lower()
        or needle in product.description.lower()
        or needle in product.supplier_name.lower()
    )


def _in_price_range(product: Product, low: float | None, high: float | None) -> bool:
    if low is not None and product.price < low:
        return False
    if high is not None and product.price > high:
        return False
    return True


def filter_and_sort(products: Iterable[Product], query: CatalogQuery) -> List[Product]:
    """
    Display list for the catalog page.

    search -> category -> price range -> stable sort. Empty parameters skip
    their stage. The input is left untouched.
    """
    result = list(products)

    if query.search_text:
        needle = query.search_text.lower()
        result = [p for p in result if _matches_search(p, needle)]

    if query.category:
        result = [p for p in result if p.category == query.category]

    if query.price_min is not None or query.price_max is not None:
        result = [p for p in result if _in_price_range(p, query.price_min, query.price_max)]

    if query.sort_key == "price-low":
        result.sort(key=lambda p: p.price)
    elif query.sort_key == "price-high":
        result.sort(key=lambda p: p.price, reverse=True)
    else:
        result.sort(key=lambda p: p.name)

    return result


@dataclass
class CatalogView:
    """Catalog state as the page sees it. An empty ready view is not an error."""

    status: ViewStatus
    products: List[Product] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def loading(cls) -> "CatalogView":
        return cls(status="loading")

    @classmethod
    def ready(cls, products: List[Product]) -> "CatalogView":
        return cls(status="ready", products=products)

    @classmethod
    def failed(cls, message: str) -> "CatalogView":
        return cls(status="error", error=message)

    @property
    def is_empty(self) -> bool:
        return self.status == "ready" and not self.products


class CatalogService:
    def __init__(self, product_service: ProductService):
        self.product_service = product_service

    async def browse(self, query: CatalogQuery | None = None) -> CatalogView:
        query = query or CatalogQuery()
        try:
            products = await self.product_service.get_all()
        except MarketplaceError as e:
            logger.warning(f"Catalog load failed: {e}")
            return CatalogView.failed(str(e))
        return CatalogView.ready(filter_and_sort(products, query))
