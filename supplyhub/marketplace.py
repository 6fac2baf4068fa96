# supplyhub/marketplace.py
from supplyhub.data.seed import seed
from supplyhub.data.store import MarketplaceStore
from supplyhub.services.cart_service import CartService
from supplyhub.services.cart_storage import CartStorage, build_cart_storage
from supplyhub.services.catalog import CatalogService
from supplyhub.services.checkout_service import CheckoutService
from supplyhub.services.dashboard_service import DashboardService
from supplyhub.services.order_service import OrderService
from supplyhub.services.product_service import ProductService
from supplyhub.services.supplier_service import SupplierService
from supplyhub.services.user_service import UserService
from supplyhub.utils.settings import SEED_MOCK_DATA


class Marketplace:
    """Wires one store, one cart and the services built on top of them."""

    def __init__(
        self,
        store: MarketplaceStore | None = None,
        cart_storage: CartStorage | None = None,
        latency_scale: float | None = None,
        seed_data: bool = SEED_MOCK_DATA,
    ):
        self.store = store or MarketplaceStore()
        if seed_data:
            seed(self.store)

        self.products = ProductService(self.store.products, latency_scale)
        self.orders = OrderService(self.store.orders, latency_scale)
        self.suppliers = SupplierService(self.store.suppliers, latency_scale)
        self.users = UserService(self.store.users, latency_scale)

        self.cart = CartService(cart_storage or build_cart_storage())
        self.catalog = CatalogService(self.products)
        self.checkout = CheckoutService(self.cart, self.orders)
        self.dashboards = DashboardService(
            self.products, self.orders, self.suppliers, self.users
        )
