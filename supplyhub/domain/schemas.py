# supplyhub/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

OrderStatus = Literal["pending", "processing", "shipped", "delivered"]
SubscriptionStatus = Literal["trial", "active", "inactive"]
Role = Literal["buyer", "supplier", "admin"]
SortKey = Literal["name", "price-low", "price-high"]


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class ProductCreate(BaseModel):
    """Payload for listing a new product."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str = ""
    price: float = Field(..., gt=0, description="Unit price, must be > 0")
    category: str = Field(..., min_length=1)
    supplier_id: int = Field(..., gt=0)
    supplier_name: str = ""
    stock: int = Field(0, ge=0, description="Units in stock")
    images: List[str] = Field(default_factory=list)
    specifications: Dict[str, str] = Field(default_factory=dict)
    minimum_order_quantity: int = Field(1, ge=1)
    status: str = "active"
    rating: float = Field(0, ge=0, le=5)
    review_count: int = Field(0, ge=0)


class Product(ProductCreate):
    id: int
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    price: float | None = Field(None, gt=0)
    category: str | None = Field(None, min_length=1)
    supplier_id: int | None = Field(None, gt=0)
    supplier_name: str | None = None
    stock: int | None = Field(None, ge=0)
    images: List[str] | None = None
    specifications: Dict[str, str] | None = None
    minimum_order_quantity: int | None = Field(None, ge=1)
    status: str | None = None


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderItem(BaseModel):
    """Single order line, price is a snapshot taken at checkout."""

    product_id: int = Field(..., gt=0)
    quantity: int = Field(..., gt=0)
    price: float = Field(..., ge=0)
    supplier_id: int | None = None
    name: str | None = None


class ShippingInfo(BaseModel):
    company_name: str = ""
    contact_name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = ""
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = ""
    zip_code: str = ""
    country: str = Field(..., min_length=1)


class PaymentInfo(BaseModel):
    """Card data entered at the payment step. Never stored as-is."""

    card_number: str = Field(..., pattern=r"^\d{12,19}$")
    expiry_date: str = Field(..., pattern=r"^\d{2}/\d{2}$")
    cvv: str = Field(..., pattern=r"^\d{3,4}$")
    cardholder_name: str = Field(..., min_length=1)

    @field_validator("card_number", mode="before")
    @classmethod
    def _strip_card_number(cls, value):
        if isinstance(value, str):
            return value.replace(" ", "").replace("-", "")
        return value


class PaymentSummary(BaseModel):
    last4: str
    cardholder_name: str


class OrderCreate(BaseModel):
    buyer_id: int = Field(..., gt=0)
    buyer_name: str = "Current User"
    supplier_id: int | None = Field(None, gt=0)
    items: List[OrderItem] = Field(..., min_length=1)
    shipping_info: ShippingInfo | None = None
    payment_info: PaymentSummary | None = None


class Order(BaseModel):
    id: int
    buyer_id: int
    buyer_name: str = ""
    supplier_id: int
    items: List[OrderItem]
    subtotal: Decimal
    commission: Decimal
    total: Decimal
    status: OrderStatus = "pending"
    created_at: datetime
    shipping_info: ShippingInfo | None = None
    payment_info: PaymentSummary | None = None


class OrderUpdate(BaseModel):
    status: OrderStatus | None = None
    shipping_info: ShippingInfo | None = None


class OrderStatusIn(BaseModel):
    status: OrderStatus


# ---------------------------------------------------------------------------
# Suppliers and users
# ---------------------------------------------------------------------------
class CompanyInfo(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    website: str = ""


class SupplierCreate(BaseModel):
    user_id: int = Field(..., gt=0)
    company_info: CompanyInfo


class Supplier(SupplierCreate):
    id: int
    subscription_status: SubscriptionStatus = "trial"
    subscription_tier: str = "Basic"
    joined_at: datetime | None = None


class SupplierUpdate(BaseModel):
    user_id: int | None = Field(None, gt=0)
    company_info: CompanyInfo | None = None
    subscription_status: SubscriptionStatus | None = None
    subscription_tier: str | None = None


class SubscriptionStatusIn(BaseModel):
    status: SubscriptionStatus


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3)
    role: Role = "buyer"


class User(UserCreate):
    id: int


class UserUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, min_length=3)
    role: Role | None = None


class Actor(BaseModel):
    """Who is calling. Passed explicitly instead of inferred from a route."""

    user_id: int = Field(..., gt=0)
    role: Role

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Cart and catalog
# ---------------------------------------------------------------------------
class CartLine(BaseModel):
    product: Product
    quantity: int = Field(..., ge=1)


class CartTotals(BaseModel):
    subtotal: Decimal
    commission: Decimal
    total: Decimal


class CartOut(BaseModel):
    items: List[CartLine]
    totals: CartTotals
    item_count: int


class CartItemIn(BaseModel):
    product_id: int = Field(..., gt=0)
    quantity: int = Field(1, gt=0)


class CartQuantityIn(BaseModel):
    quantity: int


class CheckoutIn(BaseModel):
    buyer_id: int = Field(..., gt=0)
    buyer_name: str = "Current User"
    shipping: ShippingInfo
    payment: PaymentInfo


class CatalogQuery(BaseModel):
    search_text: str = ""
    category: str = ""
    price_min: float | None = Field(None, ge=0)
    price_max: float | None = Field(None, ge=0)
    sort_key: SortKey = "name"
