"""Generic CRUD resource shared by every entity endpoint.

A lookup miss is returned as a :class:`NotFound` value instead of being
raised; the view layer hands it to ``core.exceptions.not_found_response``.
"""

from dataclasses import dataclass, replace
from typing import Any, Generic, Iterable, Mapping, TypeVar, Union

from .stores import EntityStore

T = TypeVar("T")


@dataclass(frozen=True)
class NotFound:
    """No record of ``entity_name`` is stored under ``key``."""

    entity_name: str
    key: Any

    @property
    def message(self) -> str:
        return f"{self.entity_name} with id {self.key} not found"


class CrudResource(Generic[T]):
    """List/get/create/update/delete over one store.

    Only attributes named in ``mutable_fields`` are copied onto an existing
    record by :meth:`update`; the key attribute is never among them.
    """

    def __init__(self, store: EntityStore[T], entity_name: str, mutable_fields: Iterable[str] = ()):
        self.store = store
        self.entity_name = entity_name
        self.mutable_fields = tuple(mutable_fields)

    def list(self) -> list[T]:
        return list(self.store.find_all())

    def get(self, key: Any) -> Union[T, NotFound]:
        record = self.store.find_by_id(key)
        if record is None:
            return NotFound(self.entity_name, key)
        return record

    def create(self, record: T) -> T:
        return self.store.save(record)

    def update(self, key: Any, changes: Mapping[str, Any]) -> Union[T, NotFound]:
        existing = self.get(key)
        if isinstance(existing, NotFound):
            return existing

        merged = replace(existing, **{name: changes[name] for name in self.mutable_fields if name in changes})
        self.store.save(merged)
        return merged

    def delete(self, key: Any) -> Union[str, NotFound]:
        """Delete the record under ``key`` and return the confirmation message."""
        existing = self.get(key)
        if isinstance(existing, NotFound):
            return existing

        self.store.delete(existing)
        return f"{self.entity_name} with id {key} deleted"


__all__ = ["CrudResource", "NotFound"]
