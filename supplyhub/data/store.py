# supplyhub/data/store.py
from typing import Any, Callable, Dict, Generic, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from supplyhub.domain.errors import NotFoundError, ValidationError
from supplyhub.domain.schemas import Order, Product, Supplier, User

T = TypeVar("T", bound=BaseModel)


class EntityCollection(Generic[T]):
    """
    In-memory collection of one entity type with integer identity.

    Every read returns deep copies, callers never hold a reference into
    the collection. Ids come from a high-water mark so a deleted id is
    never handed out again.
    """

    def __init__(self, model: Type[T], name: str):
        self.model = model
        self.name = name
        self._rows: List[T] = []
        self._last_id = 0

    def _index_of(self, entity_id: int) -> int:
        for index, row in enumerate(self._rows):
            if row.id == entity_id:
                return index
        raise NotFoundError(self.name, entity_id)

    def _validate(self, data: Dict[str, Any]) -> T:
        try:
            return self.model.model_validate(data)
        except SchemaValidationError as e:
            raise ValidationError.from_pydantic(self.name, e) from e

    def next_id(self) -> int:
        highest = max((row.id for row in self._rows), default=0)
        return max(highest, self._last_id) + 1

    def insert(self, data: Dict[str, Any] | BaseModel) -> T:
        if isinstance(data, BaseModel):
            data = data.model_dump()
        data = {k: v for k, v in data.items() if k != "id"}

        entity = self._validate({**data, "id": self.next_id()})
        self._rows.append(entity)
        self._last_id = entity.id
        return entity.model_copy(deep=True)

    def find_by_id(self, entity_id: int) -> T:
        return self._rows[self._index_of(entity_id)].model_copy(deep=True)

    def find_where(self, predicate: Callable[[T], bool]) -> List[T]:
        return [row.model_copy(deep=True) for row in self._rows if predicate(row)]

    def all(self) -> List[T]:
        return [row.model_copy(deep=True) for row in self._rows]

    def update(self, entity_id: int, patch: Dict[str, Any]) -> T:
        index = self._index_of(entity_id)
        merged = {**self._rows[index].model_dump(), **patch, "id": entity_id}

        entity = self._validate(merged)
        self._rows[index] = entity
        return entity.model_copy(deep=True)

    def delete(self, entity_id: int) -> T:
        index = self._index_of(entity_id)
        return self._rows.pop(index)

    def count(self) -> int:
        return len(self._rows)

    def clear(self) -> None:
        self._rows.clear()
        self._last_id = 0


class MarketplaceStore:
    """Holds one collection per entity type. Pass it to services explicitly."""

    def __init__(self):
        self.products: EntityCollection[Product] = EntityCollection(Product, "product")
        self.orders: EntityCollection[Order] = EntityCollection(Order, "order")
        self.suppliers: EntityCollection[Supplier] = EntityCollection(Supplier, "supplier")
        self.users: EntityCollection[User] = EntityCollection(User, "user")

    def collections(self) -> List[EntityCollection]:
        return [self.products, self.orders, self.suppliers, self.users]

    def is_empty(self) -> bool:
        return all(c.count() == 0 for c in self.collections())
