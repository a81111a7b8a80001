"""
Generic entity store.

The floor services only talk to persistence through this gateway: list,
filter, create, update and delete on one model at a time. There is no
transaction spanning several calls, so callers that write more than one
entity must cope with partial failure themselves.
"""
import logging
from typing import Any, List, Optional

from django.db import DatabaseError, models

from .exceptions import NotFoundError, PersistenceError

logger = logging.getLogger(__name__)

NOT_EQUAL_SUFFIX = "__ne"


class EntityStore:
    """CRUD gateway over a single Django model."""

    def __init__(self, model: type[models.Model]):
        self.model = model

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _ordered(self, queryset, sort_key: Optional[str]):
        if sort_key:
            return queryset.order_by(sort_key)
        return queryset

    def list(self, sort_key: Optional[str] = None) -> List[models.Model]:
        """Full scan, optionally ordered by ``sort_key`` (``-field`` for descending)."""
        try:
            return list(self._ordered(self.model.objects.all(), sort_key))
        except DatabaseError as e:
            raise PersistenceError(f"Failed to list {self.entity_name}: {e}") from e

    def filter(self, sort_key: Optional[str] = None, **predicates: Any) -> List[models.Model]:
        """
        Equality filter. A ``__ne`` suffix on a field name means "not equal",
        e.g. ``filter(table_id=3, status__ne="PAID")``.
        """
        equal = {}
        not_equal = {}
        for key, value in predicates.items():
            if key.endswith(NOT_EQUAL_SUFFIX):
                not_equal[key[: -len(NOT_EQUAL_SUFFIX)]] = value
            else:
                equal[key] = value

        try:
            queryset = self.model.objects.filter(**equal)
            for field, value in not_equal.items():
                queryset = queryset.exclude(**{field: value})
            return list(self._ordered(queryset, sort_key))
        except DatabaseError as e:
            raise PersistenceError(f"Failed to filter {self.entity_name}: {e}") from e

    def get(self, pk) -> models.Model:
        """Fetch one entity by id. Built on filter()."""
        found = self.filter(pk=pk)
        if not found:
            raise NotFoundError(self.entity_name, pk)
        return found[0]

    def create(self, **fields: Any) -> models.Model:
        try:
            return self.model.objects.create(**fields)
        except DatabaseError as e:
            raise PersistenceError(f"Failed to create {self.entity_name}: {e}") from e

    def update(self, pk, **fields: Any) -> None:
        """Partial update of one entity; raises NotFoundError for unknown ids."""
        try:
            instance = self.model.objects.get(pk=pk)
        except self.model.DoesNotExist:
            raise NotFoundError(self.entity_name, pk)
        except DatabaseError as e:
            raise PersistenceError(f"Failed to load {self.entity_name} {pk}: {e}") from e

        for field, value in fields.items():
            setattr(instance, field, value)

        update_fields = list(fields)
        if any(f.name == "updated_at" for f in self.model._meta.get_fields()):
            update_fields.append("updated_at")

        try:
            instance.save(update_fields=update_fields)
        except DatabaseError as e:
            raise PersistenceError(f"Failed to update {self.entity_name} {pk}: {e}") from e

    def delete(self, pk) -> None:
        try:
            deleted, _ = self.model.objects.filter(pk=pk).delete()
        except DatabaseError as e:
            raise PersistenceError(f"Failed to delete {self.entity_name} {pk}: {e}") from e
        if not deleted:
            raise NotFoundError(self.entity_name, pk)
