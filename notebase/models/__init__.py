# Importing the package registers every table on Base.metadata
from notebase.models.base import Base
from notebase.models.label import Label
from notebase.models.note import Note
from notebase.models.note_label import NoteLabel

__all__ = [
    "Base",
    "Label",
    "Note",
    "NoteLabel",
]
