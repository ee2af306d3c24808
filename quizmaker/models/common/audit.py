from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class AuditInfo:
    """Audit and soft-delete state embedded in an entity.

    Mapped with ``composite()`` over the entity's own columns, so every table
    carries the same four fields without sharing a base class. Instances are
    immutable; state changes produce a new value.
    """

    created_at: datetime
    updated_at: Optional[datetime] = None
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None

    def __composite_values__(self):
        return self.created_at, self.updated_at, self.is_deleted, self.deleted_at

    @classmethod
    def new(cls, now: Optional[datetime] = None) -> "AuditInfo":
        return cls(created_at=now or utcnow())

    def touched(self, now: Optional[datetime] = None) -> "AuditInfo":
        return replace(self, updated_at=now or utcnow())

    def soft_deleted(self, now: Optional[datetime] = None) -> "AuditInfo":
        return replace(self, is_deleted=True, deleted_at=now or utcnow())
