"""
Note/Label Association Model.

Junction table for the many-to-many relationship between notes and
labels. A row has no identity of its own: its existence is the fact.
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from notebase.models.base import Base


class NoteLabel(Base):
    """
    Membership of a label on a note.

    The composite primary key makes (note_id, label_id) unique.
    """

    __tablename__ = "notes_labels"

    note_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("notes.id", ondelete="CASCADE"),
        primary_key=True,
    )
    label_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("labels.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<NoteLabel(note_id={self.note_id}, label_id={self.label_id})>"
