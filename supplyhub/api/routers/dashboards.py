# supplyhub/api/routers/dashboards.py
from fastapi import APIRouter, Depends

from supplyhub.api.deps import get_marketplace, not_found
from supplyhub.domain.errors import NotFoundError
from supplyhub.marketplace import Marketplace

router = APIRouter(prefix="/dashboards", tags=["dashboards"])


@router.get("/buyer/{buyer_id}")
async def buyer_dashboard(buyer_id: int, mp: Marketplace = Depends(get_marketplace)):
    return await mp.dashboards.buyer_summary(buyer_id)


@router.get("/supplier/{supplier_id}")
async def supplier_dashboard(supplier_id: int, mp: Marketplace = Depends(get_marketplace)):
    try:
        return await mp.dashboards.supplier_summary(supplier_id)
    except NotFoundError as e:
        raise not_found(e)


@router.get("/admin")
async def admin_dashboard(mp: Marketplace = Depends(get_marketplace)):
    return await mp.dashboards.admin_metrics()


@router.get("/admin/orders")
async def order_analytics(mp: Marketplace = Depends(get_marketplace)):
    return await mp.dashboards.order_analytics()


@router.get("/admin/suppliers")
async def supplier_analytics(mp: Marketplace = Depends(get_marketplace)):
    return await mp.dashboards.supplier_analytics()
