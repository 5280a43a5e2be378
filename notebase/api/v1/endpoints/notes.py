"""
Notes API Endpoints.

REST API endpoints for note management and note label membership.
"""

from fastapi import APIRouter

from notebase.core.dependencies import EntityId, NoteServiceDep, RequestId
from notebase.schemas.base import ApiResponse, ResponseMetadata
from notebase.schemas.label import LabelResponse
from notebase.schemas.note import NewNote, NoteResponse, NoteUpdate

router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[list[NoteResponse]],
    summary="List notes",
)
async def list_notes(
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[list[NoteResponse]]:
    """List every note."""
    notes = await service.list_notes()
    return ApiResponse(
        data=[NoteResponse.model_validate(note) for note in notes],
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.post(
    "",
    response_model=ApiResponse[NoteResponse],
    status_code=201,
    summary="Create a note",
    description="Create a new note with a title and optional body.",
)
async def create_note(
    data: NewNote,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Create a new note."""
    note = await service.create_note(data)
    return ApiResponse(
        data=NoteResponse.model_validate(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Get a note",
)
async def get_note(
    note_id: EntityId,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Get a note by ID."""
    note = await service.get_note(note_id)
    return ApiResponse(
        data=NoteResponse.model_validate(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.put(
    "/{note_id}",
    response_model=ApiResponse[NoteResponse],
    summary="Update a note",
    description="Overwrite the title and body of a note.",
)
async def update_note(
    note_id: EntityId,
    data: NoteUpdate,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[NoteResponse]:
    """Update a note."""
    note = await service.update_note(note_id, data)
    return ApiResponse(
        data=NoteResponse.model_validate(note),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.delete(
    "/{note_id}",
    status_code=204,
    summary="Delete a note",
)
async def delete_note(
    note_id: EntityId,
    service: NoteServiceDep,
) -> None:
    """Delete a note."""
    await service.delete_note(note_id)


# =============================================================================
# Note labels
# =============================================================================


@router.get(
    "/{note_id}/labels",
    response_model=ApiResponse[list[LabelResponse]],
    summary="List the labels of a note",
)
async def list_note_labels(
    note_id: EntityId,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[list[LabelResponse]]:
    """List the labels attached to a note."""
    labels = await service.list_labels(note_id)
    return ApiResponse(
        data=[LabelResponse.model_validate(label) for label in labels],
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{note_id}/labels/{label_id}",
    response_model=ApiResponse[LabelResponse],
    summary="Get a label of a note",
)
async def get_note_label(
    note_id: EntityId,
    label_id: EntityId,
    service: NoteServiceDep,
    request_id: RequestId,
) -> ApiResponse[LabelResponse]:
    """Get a label attached to a note."""
    label = await service.get_label(note_id, label_id)
    return ApiResponse(
        data=LabelResponse.model_validate(label),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.put(
    "/{note_id}/labels/{label_id}",
    status_code=204,
    summary="Attach a label to a note",
    description="Idempotent: attaching an already attached label succeeds.",
)
async def add_note_label(
    note_id: EntityId,
    label_id: EntityId,
    service: NoteServiceDep,
) -> None:
    """Attach a label to a note."""
    await service.add_label(note_id, label_id)


@router.delete(
    "/{note_id}/labels/{label_id}",
    status_code=204,
    summary="Detach a label from a note",
)
async def remove_note_label(
    note_id: EntityId,
    label_id: EntityId,
    service: NoteServiceDep,
) -> None:
    """Detach a label from a note."""
    await service.remove_label(note_id, label_id)
