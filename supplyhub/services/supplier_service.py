# supplyhub/services/supplier_service.py
from datetime import datetime, timezone

from supplyhub.domain.errors import NotFoundError
from supplyhub.domain.schemas import SubscriptionStatus, Supplier, SupplierCreate, SupplierUpdate
from supplyhub.services.base import MockService
from supplyhub.utils import latency
from supplyhub.utils.logging import get_logger

logger = get_logger(__name__)


class SupplierService(MockService[Supplier]):
    create_schema = SupplierCreate
    update_schema = SupplierUpdate

    def _prepare_create(self, data: SupplierCreate):
        # new suppliers always start on the basic trial
        return {
            **data.model_dump(),
            "subscription_status": "trial",
            "subscription_tier": "Basic",
            "joined_at": datetime.now(timezone.utc),
        }

    async def get_by_user_id(self, user_id: int) -> Supplier:
        await self._wait(latency.GET_BY_FOREIGN_KEY)
        found = self.collection.find_where(lambda s: s.user_id == user_id)
        if not found:
            raise NotFoundError(self.entity, {"user_id": user_id})
        return found[0]

    async def update_subscription_status(self, supplier_id: int, status: SubscriptionStatus) -> Supplier:
        patch = self._parse(self.update_schema, {"subscription_status": status}).model_dump(
            exclude_unset=True
        )
        await self._wait(latency.UPDATE_STATUS)
        supplier = self.collection.update(supplier_id, patch)
        logger.info(f"Supplier {supplier_id} subscription -> {status}")
        return supplier
