"""
Slot availability endpoints.

Loading a turf's slots for a date starts a fresh board for the admin.
Block/unblock only queue changes on that board; nothing reaches the turf
API until ``save``.
"""

from datetime import date

from fastapi import APIRouter, Query

from turf_admin.dependencies import AdminSessionDep, TurfServiceDep
from turf_admin.models import SlotBoard, SlotChange

router = APIRouter(prefix="/api/turfs/{turf_id}/slots", tags=["availability"])


@router.get(
    "",
    response_model=SlotBoard,
    operation_id="listSlots",
    summary="Load slots for a turf on a date",
)
async def list_slots(
    turf_id: str,
    session: AdminSessionDep,
    service: TurfServiceDep,
    slot_date: date = Query(..., alias="date", description="Date (yyyy-mm-dd)"),
) -> SlotBoard:
    return await service.load_slots(session, turf_id, slot_date)


@router.get(
    "/pending",
    response_model=list[SlotChange],
    operation_id="listPendingSlotChanges",
    summary="Unsaved block/unblock changes",
)
async def list_pending(turf_id: str, session: AdminSessionDep, service: TurfServiceDep) -> list[SlotChange]:
    return service.pending_changes(session, turf_id)


@router.post(
    "/{slot_id}/block",
    response_model=SlotBoard,
    operation_id="blockSlot",
    summary="Queue blocking an available slot",
)
async def block_slot(
    turf_id: str, slot_id: str, session: AdminSessionDep, service: TurfServiceDep
) -> SlotBoard:
    return service.block_slot(session, turf_id, slot_id)


@router.post(
    "/{slot_id}/unblock",
    response_model=SlotBoard,
    operation_id="unblockSlot",
    summary="Queue unblocking an admin-blocked slot",
)
async def unblock_slot(
    turf_id: str, slot_id: str, session: AdminSessionDep, service: TurfServiceDep
) -> SlotBoard:
    return service.unblock_slot(session, turf_id, slot_id)


@router.post(
    "/save",
    response_model=SlotBoard,
    operation_id="saveSlotChanges",
    summary="Write queued slot changes back to the turf API",
)
async def save_changes(turf_id: str, session: AdminSessionDep, service: TurfServiceDep) -> SlotBoard:
    """
    On failure the unsaved changes are rolled back and the upstream error is
    returned; reload the slots to see the current server state.
    """
    return await service.save_changes(session, turf_id)


@router.post(
    "/discard",
    response_model=SlotBoard,
    operation_id="discardSlotChanges",
    summary="Drop queued slot changes",
)
async def discard_changes(turf_id: str, session: AdminSessionDep, service: TurfServiceDep) -> SlotBoard:
    return service.discard_changes(session, turf_id)
