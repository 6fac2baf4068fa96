# supplyhub/api/routers/cart.py
from fastapi import APIRouter, Depends

from supplyhub.api.deps import bad_request, get_marketplace, not_found
from supplyhub.domain.errors import NotFoundError, ValidationError
from supplyhub.domain.schemas import Actor, CartItemIn, CartOut, CartQuantityIn, CheckoutIn, Order
from supplyhub.marketplace import Marketplace

router = APIRouter(tags=["cart"])


@router.get("/cart", response_model=CartOut)
async def get_cart(mp: Marketplace = Depends(get_marketplace)):
    return mp.cart.snapshot()


@router.post("/cart/items", response_model=CartOut)
async def add_item(payload: CartItemIn, mp: Marketplace = Depends(get_marketplace)):
    # snapshot of the product as the catalog has it right now
    try:
        product = await mp.products.get_by_id(payload.product_id)
        return mp.cart.add_item(product, payload.quantity)
    except NotFoundError as e:
        raise not_found(e)
    except ValidationError as e:
        raise bad_request(e)


@router.put("/cart/items/{product_id}", response_model=CartOut)
async def update_item(
    product_id: int,
    payload: CartQuantityIn,
    mp: Marketplace = Depends(get_marketplace),
):
    try:
        return mp.cart.update_quantity(product_id, payload.quantity)
    except ValidationError as e:
        raise bad_request(e)


@router.delete("/cart/items/{product_id}", response_model=CartOut)
async def remove_item(product_id: int, mp: Marketplace = Depends(get_marketplace)):
    return mp.cart.remove_item(product_id)


@router.delete("/cart", response_model=CartOut)
async def clear_cart(mp: Marketplace = Depends(get_marketplace)):
    return mp.cart.clear()


@router.post("/checkout", response_model=Order, status_code=201)
async def checkout(payload: CheckoutIn, mp: Marketplace = Depends(get_marketplace)):
    actor = Actor(user_id=payload.buyer_id, role="buyer")
    try:
        return await mp.checkout.place_order(
            actor, payload.shipping, payload.payment, buyer_name=payload.buyer_name
        )
    except ValidationError as e:
        raise bad_request(e)
