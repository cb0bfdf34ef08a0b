"""
Energy Session API — the interactive calculator flow.

POST   /api/session/start             — Start a new session
GET    /api/session/{id}/status       — Current state of a session
POST   /api/session/{id}/contact      — Select one of the 8 contact options
POST   /api/session/{id}/geometry     — Switch crater input: diameter or width × height
PUT    /api/session/{id}/inputs       — Update crater/depth/impact/material inputs
POST   /api/session/{id}/format       — Toggle Auto/Full display, no recompute
POST   /api/session/{id}/calculate    — Compute and store the energy
POST   /api/session/{id}/reset        — Clear selection, inputs and result
DELETE /api/session/{id}              — Drop the session

Sessions live in process memory only.
"""

import logging
import uuid
from collections import OrderedDict
from typing import Optional

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..calculators.material_lookup import MaterialLookup
from ..config import settings
from ..session import EnergySession
from .energy import display_to_schema
from .materials import contact_to_schema

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["energy-session"])

# session_id → EnergySession, oldest first
SESSIONS: "OrderedDict[str, EnergySession]" = OrderedDict()

lookup = MaterialLookup()


def _get_session(session_id: str) -> EnergySession:
    session = SESSIONS.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _status(session_id: str, session: EnergySession) -> schemas.SessionStatus:
    contact = session.selected_contact
    return schemas.SessionStatus(
        session_id=session_id,
        selected_contact=contact_to_schema(contact) if contact else None,
        contact_display=session.contact_display,
        geometry_mode=session.geometry_mode,
        crater_diameter=session.crater_diameter,
        crater_width=session.crater_width,
        crater_height=session.crater_height,
        depth=session.depth,
        impact_type=session.impact_type,
        material=session.material,
        last_energy=session.last_energy,
        display_mode=session.display_mode,
        format_label=session.format_label,
        display=display_to_schema(session.render()),
    )


# --- Endpoints ---

@router.post("/start", response_model=schemas.SessionStatus)
def start_session(request: Optional[schemas.StartSessionRequest] = None):
    """Start a new session with the configured default material and display mode."""
    session = EnergySession()
    if request is not None:
        if request.material is not None:
            if not lookup.has_material(request.material):
                raise HTTPException(status_code=400, detail=f"Unknown material: {request.material}")
            session.material = request.material
        if request.display_mode is not None:
            session.display_mode = request.display_mode

    session_id = str(uuid.uuid4())
    SESSIONS[session_id] = session
    while len(SESSIONS) > settings.MAX_SESSIONS:
        evicted, _ = SESSIONS.popitem(last=False)
        logger.info("Session store full, evicted %s", evicted)

    logger.info("Session started: %s", session_id)
    return _status(session_id, session)


@router.get("/{session_id}/status", response_model=schemas.SessionStatus)
def get_session_status(session_id: str):
    return _status(session_id, _get_session(session_id))


@router.post("/{session_id}/contact", response_model=schemas.SessionStatus)
def select_contact(session_id: str, request: schemas.ContactRequest):
    session = _get_session(session_id)
    session.select_contact(request.key)
    return _status(session_id, session)


@router.post("/{session_id}/geometry", response_model=schemas.SessionStatus)
def switch_geometry(session_id: str, request: schemas.GeometryRequest):
    session = _get_session(session_id)
    session.switch_geometry(request.mode)
    return _status(session_id, session)


@router.put("/{session_id}/inputs", response_model=schemas.SessionStatus)
def update_inputs(session_id: str, request: schemas.SessionInputsRequest):
    """Only fields present in the request body are changed."""
    session = _get_session(session_id)
    session.set_inputs(**request.model_dump(exclude_unset=True))
    return _status(session_id, session)


@router.post("/{session_id}/format", response_model=schemas.SessionStatus)
def toggle_format(session_id: str):
    session = _get_session(session_id)
    session.toggle_display_format()
    return _status(session_id, session)


@router.post("/{session_id}/calculate", response_model=schemas.SessionStatus,
             responses={422: {"model": schemas.ValidationErrorResponse}})
def calculate(session_id: str):
    """
    Compute energy from the current selections.

    Validation failures come back as 422 with the user-facing message;
    the stored result and selections are left as they were.
    """
    session = _get_session(session_id)
    session.calculate()
    return _status(session_id, session)


@router.post("/{session_id}/reset", response_model=schemas.SessionStatus)
def reset_session(session_id: str):
    session = _get_session(session_id)
    session.reset()
    return _status(session_id, session)


@router.delete("/{session_id}")
def delete_session(session_id: str):
    _get_session(session_id)
    del SESSIONS[session_id]
    return {"ok": True, "session_id": session_id}
