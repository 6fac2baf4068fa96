# supplyhub/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from supplyhub.api.deps import bad_request, get_marketplace, not_found
from supplyhub.domain.errors import NotFoundError, ValidationError
from supplyhub.domain.schemas import Actor, Order, OrderCreate, OrderStatusIn, Role
from supplyhub.marketplace import Marketplace

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("/", response_model=List[Order])
async def list_orders(
    user_id: int | None = Query(None, gt=0),
    role: Role | None = Query(None),
    supplier_id: int | None = Query(None, gt=0),
    mp: Marketplace = Depends(get_marketplace),
):
    """
    Without an actor every order is returned. With user_id and role the
    list is scoped the way the matching dashboard shows it.
    """
    if user_id is None or role is None:
        return await mp.orders.get_all()
    try:
        return await mp.orders.list_for(Actor(user_id=user_id, role=role), supplier_id)
    except ValidationError as e:
        raise bad_request(e)


@router.get("/by-buyer/{buyer_id}", response_model=List[Order])
async def orders_by_buyer(buyer_id: int, mp: Marketplace = Depends(get_marketplace)):
    return await mp.orders.get_by_buyer_id(buyer_id)


@router.get("/by-supplier/{supplier_id}", response_model=List[Order])
async def orders_by_supplier(supplier_id: int, mp: Marketplace = Depends(get_marketplace)):
    return await mp.orders.get_by_supplier_id(supplier_id)


@router.get("/{order_id}", response_model=Order)
async def get_order(order_id: int, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.orders.get_by_id(order_id)
    except NotFoundError as e:
        raise not_found(e)


@router.post("/", response_model=Order, status_code=201)
async def create_order(payload: OrderCreate, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.orders.create(payload)
    except ValidationError as e:
        raise bad_request(e)


@router.put("/{order_id}/status", response_model=Order)
async def update_order_status(
    order_id: int,
    payload: OrderStatusIn,
    mp: Marketplace = Depends(get_marketplace),
):
    try:
        return await mp.orders.update_status(order_id, payload.status)
    except NotFoundError as e:
        raise not_found(e)
    except ValidationError as e:
        raise bad_request(e)


@router.delete("/{order_id}", response_model=Order)
async def delete_order(order_id: int, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.orders.delete(order_id)
    except NotFoundError as e:
        raise not_found(e)
