# supplyhub/api/routers/suppliers.py
from typing import List

from fastapi import APIRouter, Depends

from supplyhub.api.deps import bad_request, get_marketplace, not_found
from supplyhub.domain.errors import NotFoundError, ValidationError
from supplyhub.domain.schemas import SubscriptionStatusIn, Supplier, SupplierCreate, SupplierUpdate
from supplyhub.marketplace import Marketplace

router = APIRouter(prefix="/suppliers", tags=["suppliers"])


@router.get("/", response_model=List[Supplier])
async def list_suppliers(mp: Marketplace = Depends(get_marketplace)):
    return await mp.suppliers.get_all()


@router.get("/by-user/{user_id}", response_model=Supplier)
async def supplier_by_user(user_id: int, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.suppliers.get_by_user_id(user_id)
    except NotFoundError as e:
        raise not_found(e)


@router.get("/{supplier_id}", response_model=Supplier)
async def get_supplier(supplier_id: int, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.suppliers.get_by_id(supplier_id)
    except NotFoundError as e:
        raise not_found(e)


@router.post("/", response_model=Supplier, status_code=201)
async def create_supplier(payload: SupplierCreate, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.suppliers.create(payload)
    except ValidationError as e:
        raise bad_request(e)


@router.patch("/{supplier_id}", response_model=Supplier)
async def update_supplier(
    supplier_id: int,
    payload: SupplierUpdate,
    mp: Marketplace = Depends(get_marketplace),
):
    try:
        return await mp.suppliers.update(supplier_id, payload)
    except NotFoundError as e:
        raise not_found(e)
    except ValidationError as e:
        raise bad_request(e)


@router.put("/{supplier_id}/subscription", response_model=Supplier)
async def update_subscription(
    supplier_id: int,
    payload: SubscriptionStatusIn,
    mp: Marketplace = Depends(get_marketplace),
):
    try:
        return await mp.suppliers.update_subscription_status(supplier_id, payload.status)
    except NotFoundError as e:
        raise not_found(e)


@router.delete("/{supplier_id}", response_model=Supplier)
async def delete_supplier(supplier_id: int, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.suppliers.delete(supplier_id)
    except NotFoundError as e:
        raise not_found(e)
