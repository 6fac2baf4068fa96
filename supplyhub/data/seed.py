# supplyhub/data/seed.py
from datetime import datetime, timezone, timedelta

from supplyhub.data.store import MarketplaceStore
from supplyhub.domain.pricing import compute_totals
from supplyhub.utils.logging import get_logger

logger = get_logger(__name__)

USERS = [
    {"name": "Platform Admin", "email": "admin@supplyhub.io", "role": "admin"},
    {"name": "Maria Chen", "email": "maria@techparts.com", "role": "supplier"},
    {"name": "Tom Novak", "email": "tom@greenpack.com", "role": "supplier"},
    {"name": "Alex Rivera", "email": "alex@buildright.com", "role": "buyer"},
    {"name": "Priya Shah", "email": "priya@officeline.com", "role": "buyer"},
]

SUPPLIERS = [
    {
        "user_id": 2,
        "company_info": {
            "name": "TechParts Global",
            "description": "Electronic components and networking hardware",
            "email": "sales@techparts.com",
            "phone": "+1 555 0101",
            "address": "120 Circuit Ave, San Jose, CA",
        },
        "subscription_status": "active",
        "subscription_tier": "Professional",
    },
    {
        "user_id": 3,
        "company_info": {
            "name": "GreenPack Supplies",
            "description": "Sustainable packaging and office supplies",
            "email": "hello@greenpack.com",
            "phone": "+1 555 0202",
            "address": "8 Harbor Rd, Portland, OR",
        },
        "subscription_status": "trial",
        "subscription_tier": "Basic",
    },
]

PRODUCTS = [
    {
        "name": "Industrial Ethernet Switch 24-Port",
        "description": "Managed gigabit switch for factory floors",
        "price": 349.00,
        "category": "Electronics",
        "supplier_id": 1,
        "supplier_name": "TechParts Global",
        "stock": 40,
        "images": ["/images/switch-24.jpg"],
        "specifications": {"ports": "24", "speed": "1 Gbps", "mounting": "DIN rail"},
        "minimum_order_quantity": 1,
    },
    {
        "name": "USB-C Docking Station",
        "description": "Dual display dock with 100W power delivery",
        "price": 129.50,
        "category": "Electronics",
        "supplier_id": 1,
        "supplier_name": "TechParts Global",
        "stock": 8,
        "images": ["/images/dock.jpg"],
        "specifications": {"displays": "2", "power": "100W"},
    },
    {
        "name": "Cat6 Patch Cable (10 pack)",
        "description": "Shielded patch cables, 2 m",
        "price": 24.99,
        "category": "Electronics",
        "supplier_id": 1,
        "supplier_name": "TechParts Global",
        "stock": 300,
        "images": [],
        "specifications": {"length": "2 m", "shielding": "S/FTP"},
    },
    {
        "name": "Recycled Shipping Boxes",
        "description": "Corrugated boxes made from 100% recycled fiber",
        "price": 45.00,
        "category": "Packaging",
        "supplier_id": 2,
        "supplier_name": "GreenPack Supplies",
        "stock": 500,
        "images": ["/images/boxes.jpg"],
        "specifications": {"size": "40x30x20 cm", "pack": "50"},
        "minimum_order_quantity": 5,
    },
    {
        "name": "Compostable Mailers",
        "description": "Plant-based mailers for apparel shipping",
        "price": 18.75,
        "category": "Packaging",
        "supplier_id": 2,
        "supplier_name": "GreenPack Supplies",
        "stock": 0,
        "images": [],
        "specifications": {"pack": "100"},
    },
    {
        "name": "Ergonomic Office Chair",
        "description": "Mesh back chair with lumbar support",
        "price": 219.00,
        "category": "Office Supplies",
        "supplier_id": 2,
        "supplier_name": "GreenPack Supplies",
        "stock": 15,
        "images": ["/images/chair.jpg"],
        "specifications": {"material": "mesh", "warranty": "5 years"},
    },
]

ORDERS = [
    {
        "buyer_id": 4,
        "buyer_name": "Alex Rivera",
        "supplier_id": 1,
        "items": [
            {"product_id": 1, "quantity": 2, "price": 349.00},
            {"product_id": 3, "quantity": 4, "price": 24.99},
        ],
        "status": "delivered",
        "days_ago": 21,
    },
    {
        "buyer_id": 5,
        "buyer_name": "Priya Shah",
        "supplier_id": 2,
        "items": [{"product_id": 4, "quantity": 10, "price": 45.00}],
        "status": "shipped",
        "days_ago": 6,
    },
    {
        "buyer_id": 4,
        "buyer_name": "Alex Rivera",
        "supplier_id": 2,
        "items": [{"product_id": 6, "quantity": 3, "price": 219.00}],
        "status": "pending",
        "days_ago": 1,
    },
]


def seed(store: MarketplaceStore) -> None:
    # only seed an empty store
    if not store.is_empty():
        return

    now = datetime.now(timezone.utc)

    for user in USERS:
        store.users.insert(user)

    for supplier in SUPPLIERS:
        store.suppliers.insert({**supplier, "joined_at": now - timedelta(days=90)})

    for product in PRODUCTS:
        store.products.insert({**product, "created_at": now - timedelta(days=30)})

    for order in ORDERS:
        data = {k: v for k, v in order.items() if k != "days_ago"}
        totals = compute_totals((i["price"], i["quantity"]) for i in data["items"])
        store.orders.insert(
            {
                **data,
                **totals.model_dump(),
                "created_at": now - timedelta(days=order["days_ago"]),
            }
        )

    logger.info(
        f"Seeded mock data: {store.users.count()} users, {store.suppliers.count()} suppliers, "
        f"{store.products.count()} products, {store.orders.count()} orders"
    )
