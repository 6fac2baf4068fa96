# supplyhub/services/cart_service.py
import json
from typing import List

from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaValidationError

from supplyhub.domain.errors import StorageCorruptionError, ValidationError
from supplyhub.domain.pricing import compute_totals
from supplyhub.domain.schemas import CartLine, CartOut, CartTotals, Product
from supplyhub.services.cart_storage import CartStorage
from supplyhub.utils.settings import CART_STORAGE_KEY
from supplyhub.utils.logging import get_logger

logger = get_logger(__name__)

_LINES = TypeAdapter(List[CartLine])


class CartService:
    """
    Buyer cart kept in a single storage slot.

    Lines hold a copy of the product taken when it was added. Later price or
    stock changes in the catalog are not picked up until the line is re-added.
    The slot is read once here and rewritten after every mutation.
    """

    def __init__(self, storage: CartStorage, key: str = CART_STORAGE_KEY):
        self.storage = storage
        self.key = key
        self._lines: List[CartLine] = self._load()

    #persistence
    def _decode(self, raw: str) -> List[CartLine]:
        try:
            lines = _LINES.validate_python(json.loads(raw))
        except (ValueError, SchemaValidationError) as e:
            raise StorageCorruptionError(self.key, str(e)) from e

        ids = [line.product.id for line in lines]
        if len(ids) != len(set(ids)):
            raise StorageCorruptionError(self.key, "duplicate product lines")
        return lines

    def _load(self) -> List[CartLine]:
        raw = self.storage.get(self.key)
        if raw is None:
            return []
        try:
            lines = self._decode(raw)
        except StorageCorruptionError as e:
            logger.warning(f"{e}, resetting cart")
            self.storage.delete(self.key)
            return []
        logger.info(f"Loaded cart with {len(lines)} lines from {self.key!r}")
        return lines

    def _save(self) -> None:
        payload = _LINES.dump_python(self._lines, mode="json")
        self.storage.set(self.key, json.dumps(payload))

    def _find(self, product_id: int) -> CartLine | None:
        return next((l for l in self._lines if l.product.id == product_id), None)

    @staticmethod
    def _check_quantity(product: Product, quantity: int) -> None:
        if quantity < 1:
            raise ValidationError("Quantity must be at least 1")
        if quantity > product.stock:
            raise ValidationError(
                f"Only {product.stock} units of {product.name!r} in stock, requested {quantity}"
            )

    #queries
    @property
    def lines(self) -> List[CartLine]:
        return [line.model_copy(deep=True) for line in self._lines]

    @property
    def is_empty(self) -> bool:
        return not self._lines

    def compute_totals(self) -> CartTotals:
        return compute_totals((l.product.price, l.quantity) for l in self._lines)

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines)

    def snapshot(self) -> CartOut:
        return CartOut(
            items=self.lines,
            totals=self.compute_totals(),
            item_count=self.item_count(),
        )

    #commands
    def add_item(self, product: Product, quantity: int = 1) -> CartOut:
        existing = self._find(product.id)

        if existing:
            new_quantity = existing.quantity + quantity
            self._check_quantity(existing.product, new_quantity)
            logger.info(
                f"Product {product.id} already in cart, quantity "
                f"{existing.quantity} -> {new_quantity}"
            )
            existing.quantity = new_quantity
        else:
            self._check_quantity(product, quantity)
            logger.info(f"Adding product {product.id} x{quantity} to cart")
            self._lines.append(
                CartLine(product=product.model_copy(deep=True), quantity=quantity)
            )

        self._save()
        return self.snapshot()

    def update_quantity(self, product_id: int, quantity: int) -> CartOut:
        if quantity <= 0:
            return self.remove_item(product_id)

        line = self._find(product_id)
        if line is None:
            return self.snapshot()

        self._check_quantity(line.product, quantity)
        line.quantity = quantity
        self._save()
        return self.snapshot()

    def remove_item(self, product_id: int) -> CartOut:
        before = len(self._lines)
        self._lines = [l for l in self._lines if l.product.id != product_id]
        if len(self._lines) != before:
            logger.info(f"Removed product {product_id} from cart")
        self._save()
        return self.snapshot()

    def clear(self) -> CartOut:
        self._lines = []
        self._save()
        logger.info("Cart cleared")
        return self.snapshot()
