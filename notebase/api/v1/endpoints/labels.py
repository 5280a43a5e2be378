"""
Labels API Endpoints.

REST API endpoints for label management.
"""

from fastapi import APIRouter

from notebase.core.dependencies import EntityId, LabelServiceDep, RequestId
from notebase.schemas.base import ApiResponse, ResponseMetadata
from notebase.schemas.label import LabelResponse, LabelUpdate, NewLabel

router = APIRouter()


@router.get(
    "",
    response_model=ApiResponse[list[LabelResponse]],
    summary="List labels",
)
async def list_labels(
    service: LabelServiceDep,
    request_id: RequestId,
) -> ApiResponse[list[LabelResponse]]:
    """List every label."""
    labels = await service.list_labels()
    return ApiResponse(
        data=[LabelResponse.model_validate(label) for label in labels],
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.post(
    "",
    response_model=ApiResponse[LabelResponse],
    status_code=201,
    summary="Create a label",
)
async def create_label(
    data: NewLabel,
    service: LabelServiceDep,
    request_id: RequestId,
) -> ApiResponse[LabelResponse]:
    """Create a new label."""
    label = await service.create_label(data)
    return ApiResponse(
        data=LabelResponse.model_validate(label),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.get(
    "/{label_id}",
    response_model=ApiResponse[LabelResponse],
    summary="Get a label",
)
async def get_label(
    label_id: EntityId,
    service: LabelServiceDep,
    request_id: RequestId,
) -> ApiResponse[LabelResponse]:
    """Get a label by ID."""
    label = await service.get_label(label_id)
    return ApiResponse(
        data=LabelResponse.model_validate(label),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.put(
    "/{label_id}",
    response_model=ApiResponse[LabelResponse],
    summary="Rename a label",
)
async def rename_label(
    label_id: EntityId,
    data: LabelUpdate,
    service: LabelServiceDep,
    request_id: RequestId,
) -> ApiResponse[LabelResponse]:
    """Rename a label."""
    label = await service.rename_label(label_id, data)
    return ApiResponse(
        data=LabelResponse.model_validate(label),
        metadata=ResponseMetadata(request_id=request_id),
    )


@router.delete(
    "/{label_id}",
    status_code=204,
    summary="Delete a label",
    description="Delete a label and detach it from every note. Deleting a missing label succeeds.",
)
async def delete_label(
    label_id: EntityId,
    service: LabelServiceDep,
) -> None:
    """Delete a label."""
    await service.delete_label(label_id)
