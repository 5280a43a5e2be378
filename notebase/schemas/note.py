"""
Note Schemas.

Pydantic schemas for note API request/response validation.
Timestamps serialize as ISO 8601 under createdAt / updatedAt.
"""

from datetime import datetime

from pydantic import Field

from notebase.schemas.base import CamelModel


class NewNote(CamelModel):
    """Schema for creating a new note. The body is optional."""

    title: str = Field(
        ...,
        description="Note title",
        examples=["Plan"],
    )
    body: str | None = Field(
        default=None,
        description="Note body, empty when omitted",
        examples=["Details of the plan."],
    )


class NoteUpdate(CamelModel):
    """Schema for overwriting a note's title and body."""

    title: str = Field(..., description="Note title")
    body: str = Field(default="", description="Note body")


class NoteResponse(CamelModel):
    """Schema for a note in API responses."""

    id: int = Field(description="Note identifier")
    title: str = Field(description="Note title")
    body: str = Field(description="Note body")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")
