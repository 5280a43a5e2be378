"""
SQLAlchemy Base Model.

Base class for all database models with common fields and utilities.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from notebase.core.utils import utc_now


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class TimestampMixin:
    """
    Mixin that adds created_at and updated_at timestamps.

    The defaults only apply when a writer leaves the columns out.
    NoteRepository always supplies both values from its own clock.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utc_now,
        nullable=False,
    )


# Signed 64-bit INTEGER range shared by SQLite and PostgreSQL BIGINT
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def is_storable_id(id: int) -> bool:
    """Whether id fits the integer primary key column."""
    return MIN_ID <= id <= MAX_ID


class IntegerIdMixin:
    """Mixin that adds a store-assigned integer primary key."""

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
