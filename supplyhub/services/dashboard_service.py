# supplyhub/services/dashboard_service.py
import asyncio
from decimal import Decimal
from typing import Any, Dict, List

from supplyhub.domain.pricing import CENT
from supplyhub.domain.schemas import Order
from supplyhub.services.order_service import OrderService
from supplyhub.services.product_service import ProductService
from supplyhub.services.supplier_service import SupplierService
from supplyhub.services.user_service import UserService
from supplyhub.utils.settings import LOW_STOCK_THRESHOLD, SUBSCRIPTION_PRICE

ORDER_STATUSES = ("pending", "processing", "shipped", "delivered")
SUBSCRIPTION_STATUSES = ("active", "trial", "inactive")


def _recent(orders: List[Order], limit: int = 5) -> List[Order]:
    return sorted(orders, key=lambda o: o.created_at, reverse=True)[:limit]


def _sum(values) -> Decimal:
    return sum(values, Decimal("0.00"))


def _status_breakdown(orders: List[Order]) -> Dict[str, int]:
    return {s: sum(1 for o in orders if o.status == s) for s in ORDER_STATUSES}


class DashboardService:
    """Figures behind the buyer, supplier and admin dashboards."""

    def __init__(
        self,
        products: ProductService,
        orders: OrderService,
        suppliers: SupplierService,
        users: UserService,
    ):
        self.products = products
        self.orders = orders
        self.suppliers = suppliers
        self.users = users

    async def supplier_summary(self, supplier_id: int) -> Dict[str, Any]:
        supplier, products, orders = await asyncio.gather(
            self.suppliers.get_by_id(supplier_id),
            self.products.get_by_supplier_id(supplier_id),
            self.orders.get_by_supplier_id(supplier_id),
        )
        return {
            "supplier": supplier,
            "products": products,
            "orders": orders,
            "total_revenue": _sum(o.subtotal for o in orders),
            "total_orders": len(orders),
            "active_products": sum(1 for p in products if p.stock > 0),
            "low_stock_products": sum(
                1 for p in products if 0 < p.stock < LOW_STOCK_THRESHOLD
            ),
            "recent_orders": _recent(orders),
        }

    async def buyer_summary(self, buyer_id: int) -> Dict[str, Any]:
        orders = await self.orders.get_by_buyer_id(buyer_id)
        return {
            "orders": orders,
            "total_orders": len(orders),
            "total_spent": _sum(o.total for o in orders),
            "status_breakdown": _status_breakdown(orders),
            "recent_orders": _recent(orders),
        }

    async def admin_metrics(self) -> Dict[str, Any]:
        orders, suppliers, products, buyers = await asyncio.gather(
            self.orders.get_all(),
            self.suppliers.get_all(),
            self.products.get_all(),
            self.users.get_by_role("buyer"),
        )
        active = [s for s in suppliers if s.subscription_status == "active"]

        top_suppliers = []
        for supplier in suppliers:
            supplier_orders = [o for o in orders if o.supplier_id == supplier.id]
            top_suppliers.append(
                {
                    "id": supplier.id,
                    "company_name": supplier.company_info.name,
                    "total_orders": len(supplier_orders),
                    "total_products": sum(1 for p in products if p.supplier_id == supplier.id),
                    "total_revenue": _sum(o.subtotal for o in supplier_orders),
                    "subscription_status": supplier.subscription_status,
                }
            )
        top_suppliers.sort(key=lambda s: s["total_revenue"], reverse=True)

        return {
            "total_revenue": _sum(o.total for o in orders),
            "subscription_revenue": len(active) * SUBSCRIPTION_PRICE,
            "commission_revenue": _sum(o.commission for o in orders),
            "total_orders": len(orders),
            "total_suppliers": len(suppliers),
            "active_suppliers": len(active),
            "total_buyers": len(buyers),
            "recent_orders": _recent(orders),
            "top_suppliers": top_suppliers,
        }

    async def order_analytics(self) -> Dict[str, Any]:
        orders = await self.orders.get_all()
        revenue = _sum(o.total for o in orders)
        average = (revenue / len(orders)).quantize(CENT) if orders else Decimal("0.00")
        return {
            "total_orders": len(orders),
            "status_breakdown": _status_breakdown(orders),
            "average_order_value": average,
            "total_revenue": revenue,
        }

    async def supplier_analytics(self) -> Dict[str, Any]:
        suppliers = await self.suppliers.get_all()
        breakdown = {
            s: sum(1 for x in suppliers if x.subscription_status == s)
            for s in SUBSCRIPTION_STATUSES
        }
        return {
            "total_suppliers": len(suppliers),
            "status_breakdown": breakdown,
            "subscription_revenue": breakdown["active"] * SUBSCRIPTION_PRICE,
        }
