from fastapi import APIRouter, Depends, Query
from typing import Optional

from .models import ReportSubmit, ReportStatus
from .manager import submit_report, list_pending_reports, list_reports, get_report, approve_report, reject_report
from siglon.auth.manager import require_admin
from siglon.shared.response import success_response
from siglon.shared.store import get_store

router = APIRouter()

@router.post("/")
async def submit(report: ReportSubmit, store=Depends(get_store)):
    created = await submit_report(store, report)
    return success_response(created, "Report submitted successfully", status_code=201)

@router.get("/pending")
async def pending(store=Depends(get_store)):
    reports = await list_pending_reports(store)
    return success_response(reports, "Pending reports retrieved successfully")

@router.get("/")
async def get_all_reports(
    status: Optional[ReportStatus] = Query(None),
    store=Depends(get_store),
    admin: dict = Depends(require_admin),
):
    reports = await list_reports(store, status)
    return success_response(reports, "Reports retrieved successfully")

@router.get("/{report_id}")
async def get_single_report(report_id: int, store=Depends(get_store), admin: dict = Depends(require_admin)):
    report = await get_report(store, report_id)
    return success_response(report, "Report retrieved successfully")

@router.post("/{report_id}/approve")
async def approve(report_id: int, store=Depends(get_store), admin: dict = Depends(require_admin)):
    event = await approve_report(store, report_id)
    return success_response(event, "Report approved and added to official data")

@router.post("/{report_id}/reject")
async def reject(report_id: int, store=Depends(get_store), admin: dict = Depends(require_admin)):
    report = await reject_report(store, report_id)
    return success_response(report, "Report rejected successfully")
