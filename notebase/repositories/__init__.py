# Data access layer
from notebase.repositories.label import LabelRepository
from notebase.repositories.note import NoteRepository
from notebase.repositories.note_label import NoteLabelRepository

__all__ = [
    "LabelRepository",
    "NoteLabelRepository",
    "NoteRepository",
]
