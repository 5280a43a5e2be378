"""
Label Model.

Database model for labels (tags) that can be attached to notes.
"""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from notebase.models.base import Base, IntegerIdMixin


class Label(IntegerIdMixin, Base):
    """Label database model. Identity is the store-assigned id."""

    __tablename__ = "labels"
    __table_args__ = {"sqlite_autoincrement": True}

    name: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Label(id={self.id}, name={self.name!r})>"
