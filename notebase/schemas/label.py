"""
Label Schemas.

Pydantic schemas for label API request/response validation.
"""

from pydantic import Field

from notebase.schemas.base import CamelModel


class NewLabel(CamelModel):
    """Schema for creating a new label."""

    name: str = Field(
        ...,
        description="Label name",
        examples=["work"],
    )


class LabelUpdate(CamelModel):
    """Schema for renaming a label."""

    name: str = Field(..., description="New label name")


class LabelResponse(CamelModel):
    """Schema for a label in API responses."""

    id: int = Field(description="Label identifier")
    name: str = Field(description="Label name")
