import pytest
from fastapi.testclient import TestClient

from supplyhub.data.store import MarketplaceStore
from supplyhub.domain.schemas import Product
from supplyhub.main import create_app
from supplyhub.marketplace import Marketplace
from supplyhub.services.cart_service import CartService
from supplyhub.services.cart_storage import MemoryCartStorage
from supplyhub.services.order_service import OrderService
from supplyhub.services.product_service import ProductService
from supplyhub.services.supplier_service import SupplierService
from supplyhub.services.user_service import UserService


def make_product(product_id: int, price: float, stock: int = 100, **extra) -> Product:
    data = {
        "id": product_id,
        "name": f"Product {product_id}",
        "description": "",
        "price": price,
        "category": "Electronics",
        "supplier_id": 1,
        "supplier_name": "TechParts Global",
        "stock": stock,
    }
    data.update(extra)
    return Product(**data)


@pytest.fixture
def store():
    return MarketplaceStore()


@pytest.fixture
def products(store):
    return ProductService(store.products, latency_scale=0)


@pytest.fixture
def orders(store):
    return OrderService(store.orders, latency_scale=0)


@pytest.fixture
def suppliers(store):
    return SupplierService(store.suppliers, latency_scale=0)


@pytest.fixture
def users(store):
    return UserService(store.users, latency_scale=0)


@pytest.fixture
def storage():
    return MemoryCartStorage()


@pytest.fixture
def cart(storage):
    return CartService(storage)


@pytest.fixture
def marketplace(storage):
    return Marketplace(cart_storage=storage, latency_scale=0, seed_data=True)


@pytest.fixture
def client(marketplace):
    return TestClient(create_app(marketplace))
