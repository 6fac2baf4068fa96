# supplyhub/services/checkout_service.py
from supplyhub.domain.errors import ValidationError
from supplyhub.domain.schemas import (
    Actor,
    Order,
    OrderCreate,
    OrderItem,
    PaymentInfo,
    PaymentSummary,
    ShippingInfo,
)
from supplyhub.services.cart_service import CartService
from supplyhub.services.order_service import OrderService
from supplyhub.utils.logging import get_logger

logger = get_logger(__name__)


class CheckoutService:
    """
    Turns the cart into an order: shipping step, then payment step.

    Line prices come from the cart snapshots as they are, the catalog is not
    consulted again. Ordered lines leave the cart only once the order exists,
    anything added while the order was in flight stays.
    """

    def __init__(self, cart: CartService, orders: OrderService):
        self.cart = cart
        self.orders = orders

    def build_order(
        self,
        actor: Actor,
        shipping: ShippingInfo,
        payment: PaymentInfo,
        buyer_name: str = "Current User",
    ) -> OrderCreate:
        if self.cart.is_empty:
            raise ValidationError("Cannot check out an empty cart")

        items = [
            OrderItem(
                product_id=line.product.id,
                quantity=line.quantity,
                price=line.product.price,
                supplier_id=line.product.supplier_id,
                name=line.product.name,
            )
            for line in self.cart.lines
        ]
        return OrderCreate(
            buyer_id=actor.user_id,
            buyer_name=buyer_name,
            items=items,
            shipping_info=shipping,
            payment_info=PaymentSummary(
                last4=payment.card_number[-4:],
                cardholder_name=payment.cardholder_name,
            ),
        )

    async def place_order(
        self,
        actor: Actor,
        shipping: ShippingInfo,
        payment: PaymentInfo,
        buyer_name: str = "Current User",
    ) -> Order:
        order_data = self.build_order(actor, shipping, payment, buyer_name)
        order = await self.orders.create(order_data)

        for item in order.items:
            self.cart.remove_item(item.product_id)
        logger.info(f"Checkout complete, order {order.id}, {len(order.items)} lines removed from cart")
        return order
