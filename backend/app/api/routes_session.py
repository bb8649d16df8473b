"""Session endpoints — the client owns the state and posts it with each event."""

from fastapi import APIRouter, HTTPException

from app.api.routes_dimensions import get_dimension_or_404
from app.config import settings
from app.core.units.dimensions import UnknownPresetError
from app.models.schemas import NewSessionRequest, SessionEventRequest, SessionResponse
from app.models.session_model import apply_event, new_session, session_from_model, session_to_model

router = APIRouter(tags=["session"])


@router.post("/session/new", response_model=SessionResponse)
async def create_session(req: NewSessionRequest):
    """Fresh session with the dimension's default unit pair and empty fields."""
    dim = get_dimension_or_404(req.dimension or settings.default_dimension)
    return SessionResponse(dimension=dim.id, session=session_to_model(new_session(dim)))


@router.post("/session/event", response_model=SessionResponse)
async def session_event(req: SessionEventRequest):
    """Apply one input event and return the recomputed session."""
    dim = get_dimension_or_404(req.dimension)
    try:
        updated = apply_event(dim, session_from_model(req.session), req.event)
    except UnknownPresetError as e:
        raise HTTPException(422, detail=[{"message": str(e), "field": "preset_index"}])
    return SessionResponse(dimension=dim.id, session=session_to_model(updated))
