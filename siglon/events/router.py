from fastapi import APIRouter, Depends, Query
from typing import Optional

from .models import OfficialEventSubmit
from .manager import add_official_event, list_official_events, get_official_event, delete_official_event, get_event_stats
from siglon.auth.manager import require_admin
from siglon.shared.response import success_response
from siglon.shared.store import get_store

router = APIRouter()

@router.get("/")
async def get_events(limit: Optional[int] = Query(None, ge=1), store=Depends(get_store)):
    events = await list_official_events(store, limit)
    return success_response(events, "Official events retrieved successfully")

@router.get("/stats")
async def stats(year: Optional[int] = Query(None, ge=1900, le=2100), store=Depends(get_store)):
    summary = await get_event_stats(store, year)
    return success_response(summary, "Statistics computed successfully")

@router.get("/{event_id}")
async def get_event(event_id: int, store=Depends(get_store)):
    event = await get_official_event(store, event_id)
    return success_response(event, "Official event retrieved successfully")

@router.post("/")
async def add_event(data: OfficialEventSubmit, store=Depends(get_store), admin: dict = Depends(require_admin)):
    event = await add_official_event(store, data)
    return success_response(event, "Official event added successfully", status_code=201)

@router.delete("/{event_id}")
async def delete_event(event_id: int, store=Depends(get_store), admin: dict = Depends(require_admin)):
    await delete_official_event(store, event_id)
    return success_response({"id": event_id}, "Official event deleted successfully")
