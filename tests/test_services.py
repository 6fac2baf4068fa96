import asyncio
from decimal import Decimal

import pytest

from supplyhub.domain.errors import NotFoundError, ValidationError
from supplyhub.domain.schemas import Actor, ProductCreate
from supplyhub.utils import latency


def run(coro):
    return asyncio.run(coro)


def _product_payload(**overrides):
    data = {
        "name": "Managed Switch",
        "description": "24 port",
        "price": 349.0,
        "category": "Electronics",
        "supplier_id": 1,
        "supplier_name": "TechParts Global",
        "stock": 10,
    }
    data.update(overrides)
    return data


def _order_payload(**overrides):
    data = {
        "buyer_id": 4,
        "supplier_id": 1,
        "items": [
            {"product_id": 1, "quantity": 2, "price": 10.0},
            {"product_id": 2, "quantity": 1, "price": 25.0},
        ],
    }
    data.update(overrides)
    return data


def test_create_assigns_ids_from_one(products):
    created = [run(products.create(_product_payload(name=f"P{i}"))) for i in range(3)]

    assert [p.id for p in created] == [1, 2, 3]
    assert created[0].created_at is not None


def test_create_ignores_supplied_id(products):
    created = run(products.create({**_product_payload(), "id": 42}))
    assert created.id == 1


def test_create_accepts_schema_instance(products):
    created = run(products.create(ProductCreate(**_product_payload())))
    assert created.name == "Managed Switch"


def test_ids_not_reused_after_delete(products):
    for i in range(3):
        run(products.create(_product_payload(name=f"P{i}")))

    run(products.delete(3))
    created = run(products.create(_product_payload(name="P3")))

    assert created.id == 4


@pytest.mark.parametrize("service_name", ["products", "orders", "suppliers", "users"])
def test_get_by_id_not_found_for_every_entity(request, service_name):
    service = request.getfixturevalue(service_name)

    with pytest.raises(NotFoundError) as exc:
        run(service.get_by_id(404))

    assert exc.value.key == 404


@pytest.mark.parametrize("service_name", ["products", "orders", "suppliers", "users"])
def test_update_and_delete_not_found(request, service_name):
    service = request.getfixturevalue(service_name)

    with pytest.raises(NotFoundError):
        run(service.delete(9))
    with pytest.raises(NotFoundError):
        run(service.update(9, {}))


@pytest.mark.parametrize(
    "overrides",
    [{"price": "abc"}, {"price": 0}, {"stock": -1}, {"name": ""}],
)
def test_create_rejects_malformed_product(products, overrides):
    with pytest.raises(ValidationError):
        run(products.create(_product_payload(**overrides)))

    assert run(products.get_all()) == []


def test_update_rejects_non_numeric_price(products):
    run(products.create(_product_payload()))

    with pytest.raises(ValidationError):
        run(products.update(1, {"price": "cheap"}))


def test_update_merges_fields(products):
    run(products.create(_product_payload()))

    updated = run(products.update(1, {"stock": 3}))

    assert updated.stock == 3
    assert updated.price == 349.0


def test_results_are_copies(products):
    run(products.create(_product_payload()))

    listed = run(products.get_all())
    listed[0].price = 1.0

    assert run(products.get_by_id(1)).price == 349.0


def test_relationship_queries(products):
    run(products.create(_product_payload(name="Switch")))
    run(products.create(_product_payload(name="Boxes", category="Packaging", supplier_id=2,
                                         supplier_name="GreenPack Supplies")))

    assert [p.name for p in run(products.get_by_supplier_id(2))] == ["Boxes"]
    assert [p.name for p in run(products.get_by_category("Electronics"))] == ["Switch"]
    assert [p.name for p in run(products.search("greenpack"))] == ["Boxes"]
    assert [p.name for p in run(products.search("PACKAGING"))] == ["Boxes"]
    assert run(products.search("nothing-like-this")) == []
    assert run(products.get_categories()) == ["Electronics", "Packaging"]


def test_order_totals_are_recomputed(orders):
    order = run(
        orders.create(
            _order_payload(subtotal=1, commission=1, total=1)
        )
    )

    assert order.subtotal == Decimal("45.00")
    assert order.commission == Decimal("1.35")
    assert order.total == Decimal("46.35")
    assert order.status == "pending"


def test_order_supplier_from_first_item(orders):
    payload = _order_payload(supplier_id=None)
    payload["items"][0]["supplier_id"] = 2

    assert run(orders.create(payload)).supplier_id == 2


def test_order_without_supplier_is_rejected(orders):
    with pytest.raises(ValidationError):
        run(orders.create(_order_payload(supplier_id=None)))


def test_order_with_no_items_is_rejected(orders):
    with pytest.raises(ValidationError):
        run(orders.create(_order_payload(items=[])))


def test_order_status_update(orders):
    run(orders.create(_order_payload()))

    assert run(orders.update_status(1, "shipped")).status == "shipped"
    with pytest.raises(ValidationError):
        run(orders.update_status(1, "lost"))
    with pytest.raises(NotFoundError):
        run(orders.update_status(2, "shipped"))


def test_orders_listed_per_actor(orders):
    run(orders.create(_order_payload(buyer_id=4, supplier_id=1)))
    run(orders.create(_order_payload(buyer_id=5, supplier_id=2)))
    run(orders.create(_order_payload(buyer_id=4, supplier_id=2)))

    mine = run(orders.list_for(Actor(user_id=4, role="buyer")))
    supplier = run(orders.list_for(Actor(user_id=3, role="supplier"), supplier_id=2))
    everything = run(orders.list_for(Actor(user_id=1, role="admin")))

    assert [o.id for o in mine] == [1, 3]
    assert [o.id for o in supplier] == [2, 3]
    assert len(everything) == 3
    with pytest.raises(ValidationError):
        run(orders.list_for(Actor(user_id=3, role="supplier")))


def test_supplier_create_starts_on_trial(suppliers):
    created = run(
        suppliers.create(
            {
                "user_id": 7,
                "company_info": {"name": "Acme"},
                "subscription_status": "active",
                "subscription_tier": "Enterprise",
            }
        )
    )

    assert created.subscription_status == "trial"
    assert created.subscription_tier == "Basic"
    assert created.joined_at is not None


def test_supplier_by_user_and_subscription(suppliers):
    run(suppliers.create({"user_id": 7, "company_info": {"name": "Acme"}}))

    assert run(suppliers.get_by_user_id(7)).id == 1
    with pytest.raises(NotFoundError) as exc:
        run(suppliers.get_by_user_id(8))
    assert exc.value.key == {"user_id": 8}

    assert run(suppliers.update_subscription_status(1, "active")).subscription_status == "active"
    with pytest.raises(ValidationError):
        run(suppliers.update_subscription_status(1, "gold"))


def test_users_by_role(users):
    run(users.create({"name": "Admin", "email": "a@x.io", "role": "admin"}))
    run(users.create({"name": "Buyer", "email": "b@x.io"}))

    assert [u.name for u in run(users.get_by_role("buyer"))] == ["Buyer"]


def test_latency_is_awaited(products, monkeypatch):
    waits = []

    async def fake_latency(ms, scale=None):
        waits.append(ms)

    monkeypatch.setattr("supplyhub.services.base.simulate_latency", fake_latency)

    run(products.create(_product_payload()))
    run(products.get_by_id(1))
    run(products.get_all())

    assert waits == [latency.CREATE, latency.GET_BY_ID, latency.GET_ALL]


def test_concurrent_calls_each_touch_store_once(products):
    async def scenario():
        created = await asyncio.gather(
            *(products.create(_product_payload(name=f"P{i}")) for i in range(5))
        )
        return created

    created = run(scenario())

    assert sorted(p.id for p in created) == [1, 2, 3, 4, 5]
