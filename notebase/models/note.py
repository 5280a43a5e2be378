"""
Note Model.

Database model for notes.
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from notebase.models.base import Base, IntegerIdMixin, TimestampMixin


class Note(IntegerIdMixin, TimestampMixin, Base):
    """
    Note database model.

    A title, a body that defaults to the empty string, and two
    timestamps. created_at is written once at insert; updated_at is
    rewritten on every update.
    """

    __tablename__ = "notes"
    __table_args__ = {"sqlite_autoincrement": True}

    title: Mapped[str] = mapped_column(Text, nullable=False)
    body: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
        server_default="",
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r})>"
