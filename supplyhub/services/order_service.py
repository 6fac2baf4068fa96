# supplyhub/services/order_service.py
from datetime import datetime, timezone
from typing import List

from supplyhub.domain.errors import ValidationError
from supplyhub.domain.pricing import compute_totals
from supplyhub.domain.schemas import Actor, Order, OrderCreate, OrderStatus, OrderUpdate
from supplyhub.services.base import MockService
from supplyhub.utils import latency
from supplyhub.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService(MockService[Order]):
    """
    Orders placed from the cart.

    Totals are always recomputed from the items on create, whatever the
    caller sent, so every stored order satisfies
    total = subtotal + 3% commission.
    """

    create_schema = OrderCreate
    update_schema = OrderUpdate

    def _prepare_create(self, data: OrderCreate):
        supplier_id = data.supplier_id or next(
            (i.supplier_id for i in data.items if i.supplier_id), None
        )
        if supplier_id is None:
            raise ValidationError("Order needs a supplier_id or items carrying one")

        totals = compute_totals((i.price, i.quantity) for i in data.items)
        return {
            **data.model_dump(),
            **totals.model_dump(),
            "supplier_id": supplier_id,
            "status": "pending",
            "created_at": datetime.now(timezone.utc),
        }

    async def create(self, payload) -> Order:
        data = self._parse(self.create_schema, payload)
        prepared = self._prepare_create(data)
        await self._wait(latency.CREATE_ORDER)
        order = self.collection.insert(prepared)
        logger.info(
            f"Order {order.id} placed by buyer {order.buyer_id} "
            f"for supplier {order.supplier_id}, total {order.total}"
        )
        return order

    async def get_by_buyer_id(self, buyer_id: int) -> List[Order]:
        await self._wait(latency.GET_BY_FOREIGN_KEY)
        return self.collection.find_where(lambda o: o.buyer_id == buyer_id)

    async def get_by_supplier_id(self, supplier_id: int) -> List[Order]:
        await self._wait(latency.GET_BY_FOREIGN_KEY)
        return self.collection.find_where(lambda o: o.supplier_id == supplier_id)

    async def update_status(self, order_id: int, status: OrderStatus) -> Order:
        patch = self._parse(self.update_schema, {"status": status}).model_dump(exclude_unset=True)
        await self._wait(latency.UPDATE_STATUS)
        order = self.collection.update(order_id, patch)
        logger.info(f"Order {order_id} status -> {status}")
        return order

    async def list_for(self, actor: Actor, supplier_id: int | None = None) -> List[Order]:
        """
        Orders visible to the given actor.

        buyer: own orders, supplier: orders for supplier_id, admin: all.
        """
        if actor.role == "buyer":
            return await self.get_by_buyer_id(actor.user_id)
        if actor.role == "supplier":
            if supplier_id is None:
                raise ValidationError("supplier_id is required for supplier order listing")
            return await self.get_by_supplier_id(supplier_id)
        return await self.get_all()
