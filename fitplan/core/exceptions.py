"""Typed errors raised by the store. Callers decide how to present or retry them."""

from __future__ import annotations


class FitplanError(Exception):
    """Base for all store errors."""


class NotFoundError(FitplanError):
    """Referenced row does not exist (get/update/delete of a missing id)."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class ForeignKeyError(FitplanError):
    """Create/update references a parent row that does not exist."""

    def __init__(self, entity: str, field: str, value: int):
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity}.{field} references missing row {value}")


class ReferentialIntegrityError(FitplanError):
    """Delete blocked because dependent rows still reference the target."""

    def __init__(self, entity: str, entity_id: int, dependents: int):
        self.entity = entity
        self.entity_id = entity_id
        self.dependents = dependents
        super().__init__(
            f"{entity} {entity_id} is referenced by {dependents} row(s) and cannot be deleted"
        )


class SeedError(FitplanError):
    """Catalog seed input is malformed; nothing was written."""


class StorageError(FitplanError):
    """Underlying database is unreachable, locked or corrupt."""
