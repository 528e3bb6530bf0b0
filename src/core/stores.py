"""Entity store interface and its Django ORM adapter.

Handlers depend only on :class:`EntityStore`. Records are plain dataclasses;
the Django models behind :class:`ModelStore` are a storage detail and never
leave this module.
"""

from dataclasses import asdict, fields
from typing import Any, Generic, Optional, Protocol, TypeVar

from django.db import models

T = TypeVar("T")


class EntityStore(Protocol[T]):
    """Persistence collaborator keyed by the entity's identifier field."""

    def find_by_id(self, key: Any) -> Optional[T]:
        ...

    def find_all(self) -> list[T]:
        ...

    def save(self, record: T) -> T:
        """Insert or update ``record`` and return it as persisted."""
        ...

    def delete(self, record: T) -> None:
        ...


class ModelStore(Generic[T]):
    """Store records through a Django model whose field names match the record.

    ``save`` is an upsert keyed on the model's primary key. A record whose
    surrogate key is ``None`` is inserted and returned with the key the
    database assigned. Database errors propagate unchanged.
    """

    def __init__(self, model: type[models.Model], record_type: type[T]):
        self.model = model
        self.record_type = record_type
        self.key_field = model._meta.pk.name
        self._field_names = [f.name for f in fields(record_type)]

    def find_by_id(self, key: Any) -> Optional[T]:
        try:
            instance = self.model.objects.get(pk=key)
        except self.model.DoesNotExist:
            return None
        return self._to_record(instance)

    def find_all(self) -> list[T]:
        return [self._to_record(instance) for instance in self.model.objects.all()]

    def save(self, record: T) -> T:
        instance = self.model(**asdict(record))
        instance.save()
        return self._to_record(instance)

    def delete(self, record: T) -> None:
        self.model.objects.filter(pk=getattr(record, self.key_field)).delete()

    def _to_record(self, instance: models.Model) -> T:
        return self.record_type(**{name: getattr(instance, name) for name in self._field_names})


__all__ = ["EntityStore", "ModelStore"]
