# supplyhub/services/base.py
from typing import Any, Dict, Generic, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from supplyhub.data.store import EntityCollection
from supplyhub.domain.errors import ValidationError
from supplyhub.utils import latency
from supplyhub.utils.latency import simulate_latency
from supplyhub.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


class MockService(Generic[T]):
    """
    Async CRUD over one entity collection, shaped like a remote API.

    Every call waits out a simulated round-trip first and then touches the
    store exactly once, so the store access itself never interleaves with
    another call. Nothing is retried here, errors go straight to the caller.
    """

    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]

    def __init__(self, collection: EntityCollection[T], latency_scale: float | None = None):
        self.collection = collection
        self.latency_scale = latency_scale

    @property
    def entity(self) -> str:
        return self.collection.name

    async def _wait(self, ms: int) -> None:
        await simulate_latency(ms, self.latency_scale)

    def _parse(self, schema: Type[BaseModel], payload: Any) -> BaseModel:
        if isinstance(payload, schema):
            return payload
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(exclude_unset=True)
        try:
            return schema.model_validate(payload)
        except SchemaValidationError as e:
            raise ValidationError.from_pydantic(self.entity, e) from e

    def _prepare_create(self, data: BaseModel) -> Dict[str, Any]:
        return data.model_dump()

    #queries
    async def get_all(self) -> List[T]:
        await self._wait(latency.GET_ALL)
        return self.collection.all()

    async def get_by_id(self, entity_id: int) -> T:
        await self._wait(latency.GET_BY_ID)
        return self.collection.find_by_id(entity_id)

    #commands
    async def create(self, payload: Any) -> T:
        data = self._parse(self.create_schema, payload)
        await self._wait(latency.CREATE)
        created = self.collection.insert(self._prepare_create(data))
        logger.info(f"Created {self.entity} {created.id}")
        return created

    async def update(self, entity_id: int, payload: Any) -> T:
        patch = self._parse(self.update_schema, payload).model_dump(exclude_unset=True)
        await self._wait(latency.UPDATE)
        updated = self.collection.update(entity_id, patch)
        logger.info(f"Updated {self.entity} {entity_id}: {sorted(patch)}")
        return updated

    async def delete(self, entity_id: int) -> T:
        await self._wait(latency.DELETE)
        deleted = self.collection.delete(entity_id)
        logger.info(f"Deleted {self.entity} {entity_id}")
        return deleted
