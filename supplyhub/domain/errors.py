# supplyhub/domain/errors.py
from typing import Any


class MarketplaceError(Exception):
    """Base class for every recoverable error raised by the core."""


class NotFoundError(MarketplaceError):
    """An id or query yielded no entity."""

    def __init__(self, entity: str, key: Any):
        self.entity = entity
        self.key = key
        super().__init__(f"{entity.capitalize()} not found: {key!r}")


class ValidationError(MarketplaceError, ValueError):
    """Malformed input to create/update or to a cart operation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.message = message
        self.errors = errors or []
        super().__init__(message)

    @classmethod
    def from_pydantic(cls, entity: str, exc) -> "ValidationError":
        errors = exc.errors(include_url=False)
        fields = ", ".join(".".join(str(p) for p in e["loc"]) for e in errors)
        return cls(f"Invalid {entity} data: {fields}", errors)


class StorageCorruptionError(MarketplaceError):
    """The persisted cart slot could not be decoded."""

    def __init__(self, key: str, reason: str = ""):
        self.key = key
        self.reason = reason
        super().__init__(f"Persisted value under {key!r} is unreadable: {reason}")
