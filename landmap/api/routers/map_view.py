"""Map, view and form endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from ...context import AppContext
from ..dependencies import get_context
from ..schemas import FormFields, MapState, SuccessResponse, ViewState

router = APIRouter()


@router.get("/map", response_model=MapState)
async def get_map_state(context: AppContext = Depends(get_context)):
    """Center, zoom, visible markers and the open popup."""
    return MapState.model_validate(context.map.snapshot())


@router.post("/map/markers/{marker_id}/click", response_model=SuccessResponse)
async def click_marker(marker_id: str, context: AppContext = Depends(get_context)):
    """Report a click on a map marker."""
    if not context.map.click(marker_id):
        raise HTTPException(status_code=404, detail=f"Marker '{marker_id}' not on the map")
    return SuccessResponse(message=f"Marker '{marker_id}' clicked")


@router.get("/view", response_model=ViewState)
async def get_view_state(context: AppContext = Depends(get_context)):
    """Sidebar entries, popup content and highlight."""
    return context.projector.state()


@router.get("/form", response_model=FormFields)
async def get_form(context: AppContext = Depends(get_context)):
    """Current form coordinate fields and error line."""
    return FormFields(**context.form.model_dump())


@router.post("/form/location", response_model=FormFields)
async def use_my_location(context: AppContext = Depends(get_context)):
    """Fill the form coordinates from the current position."""
    await context.router.use_current_location()
    return FormFields(**context.form.model_dump())
