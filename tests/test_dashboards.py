import asyncio
from decimal import Decimal

import pytest

from supplyhub.domain.errors import NotFoundError


def run(coro):
    return asyncio.run(coro)


def test_supplier_summary(marketplace):
    summary = run(marketplace.dashboards.supplier_summary(1))

    assert summary["supplier"].company_info.name == "TechParts Global"
    assert summary["total_revenue"] == Decimal("797.96")
    assert summary["total_orders"] == 1
    assert summary["active_products"] == 3
    assert summary["low_stock_products"] == 1


def test_supplier_summary_ignores_out_of_stock_products(marketplace):
    summary = run(marketplace.dashboards.supplier_summary(2))

    assert summary["active_products"] == 2
    assert summary["low_stock_products"] == 0
    assert [o.id for o in summary["recent_orders"]] == [3, 2]


def test_supplier_summary_unknown_supplier(marketplace):
    with pytest.raises(NotFoundError):
        run(marketplace.dashboards.supplier_summary(42))


def test_buyer_summary(marketplace):
    summary = run(marketplace.dashboards.buyer_summary(4))

    assert summary["total_orders"] == 2
    assert summary["total_spent"] == Decimal("1498.61")
    assert summary["status_breakdown"]["pending"] == 1
    assert summary["status_breakdown"]["delivered"] == 1


def test_admin_metrics(marketplace):
    metrics = run(marketplace.dashboards.admin_metrics())

    assert metrics["total_revenue"] == Decimal("1962.11")
    assert metrics["commission_revenue"] == Decimal("57.15")
    assert metrics["subscription_revenue"] == 300
    assert metrics["total_orders"] == 3
    assert metrics["active_suppliers"] == 1
    assert metrics["total_buyers"] == 2
    assert [s["id"] for s in metrics["top_suppliers"]] == [2, 1]
    assert metrics["top_suppliers"][0]["total_products"] == 3


def test_order_and_supplier_analytics(marketplace):
    orders = run(marketplace.dashboards.order_analytics())
    suppliers = run(marketplace.dashboards.supplier_analytics())

    assert orders["status_breakdown"] == {
        "pending": 1, "processing": 0, "shipped": 1, "delivered": 1,
    }
    assert orders["average_order_value"] == Decimal("654.04")
    assert suppliers["status_breakdown"] == {"active": 1, "trial": 1, "inactive": 0}


def test_analytics_on_empty_store(storage):
    from supplyhub.marketplace import Marketplace

    empty = Marketplace(cart_storage=storage, latency_scale=0, seed_data=False)

    assert run(empty.dashboards.order_analytics())["average_order_value"] == Decimal("0.00")
