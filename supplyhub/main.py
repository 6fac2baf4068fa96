# supplyhub/main.py
from fastapi import FastAPI
import uvicorn

from supplyhub.api.routers import cart, dashboards, health, orders, products, suppliers, users
from supplyhub.marketplace import Marketplace
from supplyhub.utils.logging import get_logger

logger = get_logger(__name__)


def create_app(marketplace: Marketplace | None = None) -> FastAPI:
    app = FastAPI(
        title="SupplyHub Marketplace",
        version="1.0.0",
    )
    app.state.marketplace = marketplace or Marketplace()

    app.include_router(health.router)
    app.include_router(products.router)
    app.include_router(orders.router)
    app.include_router(suppliers.router)
    app.include_router(users.router)
    app.include_router(cart.router)
    app.include_router(dashboards.router)

    logger.info("SupplyHub app created")
    return app


def run() -> None:
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
