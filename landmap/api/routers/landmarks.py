"""Landmark management endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import Response

from ...context import AppContext
from ...models.form import ImageUpload, LandmarkForm
from ...services import form_validation
from ...utils.image_utils import decode_data_url
from ..dependencies import get_context
from ..schemas import DeleteResponse, LandmarkDetail, ListClick, SuccessResponse, VisibilityUpdate

router = APIRouter()


def get_landmark_or_404(context: AppContext, landmark_id: str):
    """Look up a landmark for a read endpoint."""
    landmark = context.store.get(landmark_id)
    if landmark is None:
        raise HTTPException(status_code=404, detail=f"Landmark '{landmark_id}' not found")
    return landmark


async def read_upload(image: Optional[UploadFile]) -> Optional[ImageUpload]:
    """Convert a multipart file field; an empty file input means no image."""
    if image is None or not image.filename:
        return None
    data = await image.read()
    return ImageUpload(data=data, filename=image.filename, content_type=image.content_type)


@router.get("", response_model=list[LandmarkDetail])
async def list_landmarks(context: AppContext = Depends(get_context)):
    """List all landmarks in insertion order."""
    return [LandmarkDetail.from_landmark(landmark) for landmark in context.store.list()]


@router.post("", response_model=LandmarkDetail, status_code=201)
async def create_landmark(
    title: str = Form(default=""),
    description: str = Form(default=""),
    latitude: str = Form(default=""),
    longitude: str = Form(default=""),
    image: Optional[UploadFile] = File(default=None),
    context: AppContext = Depends(get_context),
):
    """Submit the landmark form."""
    form = LandmarkForm(
        title=title,
        description=description,
        latitude=latitude,
        longitude=longitude,
        image=await read_upload(image),
    )

    result = await context.router.submit_form(form)
    if not result.ok:
        status_code = 400 if result.error == form_validation.IMAGE_UNREADABLE else 422
        raise HTTPException(status_code=status_code, detail=result.error)

    return LandmarkDetail.from_landmark(result.landmark)


@router.get("/{landmark_id}", response_model=LandmarkDetail)
async def get_landmark(landmark_id: str, context: AppContext = Depends(get_context)):
    """Get details about a specific landmark."""
    return LandmarkDetail.from_landmark(get_landmark_or_404(context, landmark_id))


@router.get("/{landmark_id}/image")
async def get_landmark_image(landmark_id: str, context: AppContext = Depends(get_context)):
    """Get the image attached to a landmark."""
    landmark = get_landmark_or_404(context, landmark_id)
    if not landmark.image:
        raise HTTPException(status_code=404, detail="Landmark has no image")

    mime_type, data = decode_data_url(landmark.image)
    return Response(content=data, media_type=mime_type)


@router.delete("/{landmark_id}", response_model=DeleteResponse)
async def delete_landmark(landmark_id: str, context: AppContext = Depends(get_context)):
    """Remove a landmark. Unknown ids are reported, not rejected."""
    deleted = context.router.delete_clicked(landmark_id)
    return DeleteResponse(deleted=deleted, id=landmark_id)


@router.put("/{landmark_id}/visibility", response_model=SuccessResponse)
async def set_visibility(
    landmark_id: str,
    request: VisibilityUpdate,
    context: AppContext = Depends(get_context),
):
    """Show or hide a landmark's marker."""
    context.router.visibility_toggled(landmark_id, request.visible)
    state = "shown" if request.visible else "hidden"
    return SuccessResponse(message=f"Landmark '{landmark_id}' {state}")


@router.post("/{landmark_id}/click", response_model=SuccessResponse)
async def click_list_entry(
    landmark_id: str,
    request: ListClick,
    context: AppContext = Depends(get_context),
):
    """A click on a sidebar entry (or one of its controls)."""
    context.router.list_item_clicked(landmark_id, request.target)
    return SuccessResponse(message=f"Click on '{landmark_id}' ({request.target.value}) handled")
