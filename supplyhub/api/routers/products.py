# supplyhub/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from supplyhub.api.deps import bad_request, get_marketplace, not_found
from supplyhub.domain.errors import NotFoundError, ValidationError
from supplyhub.domain.schemas import CatalogQuery, Product, ProductCreate, ProductUpdate, SortKey
from supplyhub.marketplace import Marketplace

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/", response_model=List[Product])
async def list_products(
    search: str = Query(""),
    category: str = Query(""),
    price_min: float | None = Query(None, ge=0),
    price_max: float | None = Query(None, ge=0),
    sort: SortKey = Query("name"),
    mp: Marketplace = Depends(get_marketplace),
):
    """Catalog view: filtered and sorted product list."""
    query = CatalogQuery(
        search_text=search,
        category=category,
        price_min=price_min,
        price_max=price_max,
        sort_key=sort,
    )
    view = await mp.catalog.browse(query)
    if view.status == "error":
        raise HTTPException(status_code=503, detail=view.error)
    return view.products


@router.get("/categories", response_model=List[str])
async def list_categories(mp: Marketplace = Depends(get_marketplace)):
    return await mp.products.get_categories()


@router.get("/search", response_model=List[Product])
async def search_products(q: str = Query(..., min_length=1), mp: Marketplace = Depends(get_marketplace)):
    return await mp.products.search(q)


@router.get("/by-category/{category}", response_model=List[Product])
async def products_by_category(category: str, mp: Marketplace = Depends(get_marketplace)):
    return await mp.products.get_by_category(category)


@router.get("/by-supplier/{supplier_id}", response_model=List[Product])
async def products_by_supplier(supplier_id: int, mp: Marketplace = Depends(get_marketplace)):
    return await mp.products.get_by_supplier_id(supplier_id)


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: int, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.products.get_by_id(product_id)
    except NotFoundError as e:
        raise not_found(e)


@router.post("/", response_model=Product, status_code=201)
async def create_product(payload: ProductCreate, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.products.create(payload)
    except ValidationError as e:
        raise bad_request(e)


@router.patch("/{product_id}", response_model=Product)
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    mp: Marketplace = Depends(get_marketplace),
):
    try:
        return await mp.products.update(product_id, payload)
    except NotFoundError as e:
        raise not_found(e)
    except ValidationError as e:
        raise bad_request(e)


@router.delete("/{product_id}", response_model=Product)
async def delete_product(product_id: int, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.products.delete(product_id)
    except NotFoundError as e:
        raise not_found(e)
