# supplyhub/services/product_service.py
from datetime import datetime, timezone
from typing import List

from supplyhub.domain.schemas import Product, ProductCreate, ProductUpdate
from supplyhub.services.base import MockService
from supplyhub.utils import latency


class ProductService(MockService[Product]):
    create_schema = ProductCreate
    update_schema = ProductUpdate

    def _prepare_create(self, data: ProductCreate):
        return {**data.model_dump(), "created_at": datetime.now(timezone.utc)}

    async def get_by_supplier_id(self, supplier_id: int) -> List[Product]:
        await self._wait(latency.GET_BY_FOREIGN_KEY)
        return self.collection.find_where(lambda p: p.supplier_id == supplier_id)

    async def get_by_category(self, category: str) -> List[Product]:
        await self._wait(latency.GET_BY_FOREIGN_KEY)
        return self.collection.find_where(lambda p: p.category == category)

    async def search(self, query: str) -> List[Product]:
        """Case-insensitive match on name, description, category and supplier."""
        await self._wait(latency.SEARCH)
        needle = query.lower()
        return self.collection.find_where(
            lambda p: needle in p.name.lower()
            or needle in p.description.lower()
            or needle in p.category.lower()
            or needle in p.supplier_name.lower()
        )

    async def get_categories(self) -> List[str]:
        await self._wait(latency.GET_ALL)
        seen = []
        for product in self.collection.all():
            if product.category not in seen:
                seen.append(product.category)
        return seen
