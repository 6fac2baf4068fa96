# supplyhub/api/routers/health.py
from fastapi import APIRouter, Depends

from supplyhub.api.deps import get_marketplace
from supplyhub.marketplace import Marketplace

router = APIRouter(tags=["health"])


@router.get("/health")
def health(mp: Marketplace = Depends(get_marketplace)):
    return {
        "status": "ok",
        "products": mp.store.products.count(),
        "orders": mp.store.orders.count(),
        "suppliers": mp.store.suppliers.count(),
        "users": mp.store.users.count(),
    }
