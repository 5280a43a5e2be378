"""
FastAPI Dependencies.

Shared dependencies for request handling. The Database is owned by the
application (app.state.database) and reached through these dependencies,
never through a module-level global.
"""

import uuid
from typing import Annotated

from fastapi import Depends, Header, Path, Request

from notebase.core.database import Database
from notebase.models.base import MAX_ID
from notebase.services.label import LabelService
from notebase.services.note import NoteService


def get_database(request: Request) -> Database:
    """Return the application's connection pool handle."""
    return request.app.state.database


DatabaseDep = Annotated[Database, Depends(get_database)]


def get_label_service(database: DatabaseDep) -> LabelService:
    return LabelService(database.session_factory)


def get_note_service(database: DatabaseDep) -> NoteService:
    return NoteService(database.session_factory)


LabelServiceDep = Annotated[LabelService, Depends(get_label_service)]
NoteServiceDep = Annotated[NoteService, Depends(get_note_service)]


async def get_request_id(x_request_id: str | None = Header(None)) -> str:
    """
    Extract or generate request ID from headers.

    Used for request tracing and correlation.
    """
    return x_request_id or str(uuid.uuid4())


RequestId = Annotated[str, Depends(get_request_id)]


# Path id bounded to the primary key range; out-of-range ids are a 422
EntityId = Annotated[int, Path(ge=1, le=MAX_ID)]
