import logging

from .models import ReportSubmit, Report, PENDING, APPROVED, REJECTED
from .utils import build_event_from_report
from siglon.shared.errors import NotFound, InvalidState, WriteFailure
from siglon.notifications.manager import notify_broadcast, notify_admin

logger = logging.getLogger("reports.manager")


async def submit_report(store, report: ReportSubmit) -> Report:
    """Store a new citizen report as pending"""
    logger.info(f"Citizen '{report.reporter_name}' is submitting a report at ({report.latitude}, {report.longitude})")
    created = await store.insert_report(report)
    logger.info(f"Report {created.id} submitted successfully")
    await notify_admin("report.submitted", created)
    return created


async def list_pending_reports(store) -> list[Report]:
    reports = await store.list_reports(status=PENDING)
    # Guard against backends that ignore the status filter.
    return [r for r in reports if r.status == PENDING]


async def list_reports(store, status=None) -> list[Report]:
    return await store.list_reports(status=status)


async def get_report(store, report_id: int) -> Report:
    report = await store.get_report(report_id)
    if report is None:
        logger.warning(f"Report {report_id} not found")
        raise NotFound(f"Report {report_id} not found")
    return report


async def _get_pending_report(store, report_id: int) -> Report:
    report = await get_report(store, report_id)
    if not report.is_pending:
        logger.warning(f"Report {report_id} is already {report.status}")
        raise InvalidState(f"Report {report_id} has already been processed ({report.status})")
    return report


async def approve_report(store, report_id: int):
    """
    Promote a pending report to an official event.

    The event is written first and the report status second, so a failed
    event insert leaves the report pending and safe to retry. There is no
    transaction across the two writes: if the status update fails, the new
    event stays in place and the error surfaces as a plain WriteFailure.
    """
    logger.info(f"Approving report {report_id}")
    report = await _get_pending_report(store, report_id)

    event = await store.insert_event(build_event_from_report(report))
    logger.info(f"Official event {event.id} created from report {report_id}")

    try:
        updated = await store.update_report_status(report_id, APPROVED)
    except WriteFailure:
        logger.error(f"Report {report_id} is still pending although official event {event.id} was created from it")
        raise
    if updated is None:
        logger.error(f"Report {report_id} disappeared before its status could be updated; official event {event.id} remains")
        raise WriteFailure(f"Failed to mark report {report_id} as approved")

    logger.info(f"Report {report_id} approved successfully")
    await notify_broadcast("report.approved", {"report_id": report_id, "event_id": event.id})
    await notify_broadcast("event.created", event)
    return event


async def reject_report(store, report_id: int) -> Report:
    """Mark a pending report as rejected. No event is created."""
    logger.info(f"Rejecting report {report_id}")
    await _get_pending_report(store, report_id)
    updated = await store.update_report_status(report_id, REJECTED)
    if updated is None:
        raise NotFound(f"Report {report_id} not found")
    logger.info(f"Report {report_id} rejected successfully")
    await notify_broadcast("report.rejected", {"report_id": report_id})
    return updated
