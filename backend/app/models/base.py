"""
CodeMate Backend — Shared Column Types and Mixins
===================================================

What:  Timestamp helpers shared by every model.
Why:   All five tables carry created_at; four of them also carry updated_at.
How:   UTCDateTime guarantees timezone-aware UTC datetimes on every dialect,
       so timestamps compare correctly whether they came from PostgreSQL
       (TIMESTAMPTZ) or SQLite (naive text).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy import DateTime, text
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def next_update_timestamp(previous: Optional[datetime]) -> datetime:
    """
    Timestamp for an update that is guaranteed to be later than `previous`.

    Two updates inside the same clock tick would otherwise leave updated_at
    unchanged; bumping by one microsecond keeps the column strictly increasing.
    """
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware DateTime stored in UTC.

    PostgreSQL returns aware values already; SQLite returns naive ones,
    which are tagged as UTC on the way out.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class CreatedAtMixin:
    """Immutable insertion timestamp."""

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )


class TimestampMixin(CreatedAtMixin):
    """created_at plus an updated_at that services advance on every update."""

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
    )
