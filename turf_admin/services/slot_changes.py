"""
Pending slot changes – admin block/unblock with explicit save.

An admin toggles slots between available and blocked on a freshly loaded
(turf, date) board.  Nothing is sent until ``save``; a failed save rolls the
board back to what the server last reported.

Usage::

    queue = SlotChangeQueue(turf_id, day, slots)
    queue.block("slot-7")
    board = queue.board()              # slots with the block applied
    await queue.save(client, session)  # write-back, or rollback + raise
"""

from __future__ import annotations

import logging
from datetime import date

from turf_admin.errors import SlotNotFoundError, SlotNotMutableError
from turf_admin.models import SlotBoard, SlotChange, SlotStatus, TimeSlot
from turf_admin.services.turf_api.api_models import UpdateSlotStatusPayload
from turf_admin.services.turf_api.client import TurfApiClient
from turf_admin.services.turf_api.config import (
    REQUEST_DATE_FORMAT,
    SLOT_STATUS_AVAILABLE,
    SLOT_STATUS_BLOCKED,
)
from turf_admin.session import AdminSession

logger = logging.getLogger(__name__)

_MUTABLE_STATUSES = frozenset({SlotStatus.AVAILABLE, SlotStatus.BLOCKED_BY_ADMIN})

_WIRE_STATUS = {
    SlotStatus.BLOCKED_BY_ADMIN: SLOT_STATUS_BLOCKED,
    SlotStatus.AVAILABLE: SLOT_STATUS_AVAILABLE,
}


class SlotChangeQueue:
    """Server-reported slots for one (turf, date) plus unsaved changes."""

    def __init__(self, turf_id: str, slot_date: date, slots: list[TimeSlot]) -> None:
        self.turf_id = turf_id
        self.slot_date = slot_date
        self._server: dict[str, TimeSlot] = {s.id: s for s in slots}
        self._order = [s.id for s in slots]
        # slot_id → target status
        self._pending: dict[str, SlotStatus] = {}

    # ── Local edits ───────────────────────────────────────────────────

    def block(self, slot_id: str) -> None:
        self._set(slot_id, SlotStatus.BLOCKED_BY_ADMIN)

    def unblock(self, slot_id: str) -> None:
        self._set(slot_id, SlotStatus.AVAILABLE)

    def _set(self, slot_id: str, target: SlotStatus) -> None:
        slot = self._server.get(slot_id)
        if slot is None:
            raise SlotNotFoundError(
                f"Slot {slot_id} is not on the board for turf {self.turf_id} on {self.slot_date}.",
                slot_id=slot_id,
            )
        if slot.status not in _MUTABLE_STATUSES:
            raise SlotNotMutableError(
                f"Slot {slot.start_time} - {slot.end_time} is {slot.status.value} and cannot be changed.",
                slot_id=slot_id,
                status=slot.status.value,
            )
        if target == slot.status:
            # Toggled back to what the server has – nothing left to save.
            self._pending.pop(slot_id, None)
        else:
            self._pending[slot_id] = target

    def mark_booked(self, slot_ids: list[str]) -> None:
        """Record slots booked elsewhere; their pending changes no longer apply."""
        for sid in slot_ids:
            slot = self._server.get(sid)
            if slot is None:
                continue
            self._server[sid] = slot.model_copy(update={"status": SlotStatus.BOOKED})
            if self._pending.pop(sid, None) is not None:
                logger.info("Dropped pending change on slot %s, it was just booked", sid)

    def discard(self) -> None:
        if self._pending:
            logger.info("Discarding %d pending slot change(s) for turf %s", len(self._pending), self.turf_id)
        self._pending.clear()

    # ── Views ─────────────────────────────────────────────────────────

    def pending(self) -> list[SlotChange]:
        return [
            SlotChange(slot_id=sid, from_status=self._server[sid].status, to_status=target)
            for sid, target in self._pending.items()
        ]

    def view(self) -> list[TimeSlot]:
        slots: list[TimeSlot] = []
        for sid in self._order:
            slot = self._server[sid]
            target = self._pending.get(sid)
            slots.append(slot.model_copy(update={"status": target}) if target else slot)
        return slots

    def board(self) -> SlotBoard:
        return SlotBoard(
            turf_id=self.turf_id,
            slot_date=self.slot_date,
            slots=self.view(),
            pending=self.pending(),
        )

    # ── Reconcile ─────────────────────────────────────────────────────

    async def save(self, client: TurfApiClient, session: AdminSession) -> list[SlotChange]:
        """Write pending changes back to the API.

        One call per target status.  Each accepted call becomes server state
        immediately; on a failure the remaining pending changes are rolled
        back and the error propagates.
        """
        changes = self.pending()
        if not changes:
            return []

        by_target: dict[SlotStatus, list[SlotChange]] = {}
        for change in changes:
            by_target.setdefault(change.to_status, []).append(change)

        saved: list[SlotChange] = []
        try:
            for target, group in by_target.items():
                await client.update_slot_status(
                    session,
                    UpdateSlotStatusPayload(
                        turfID=self.turf_id,
                        bookingDate=self.slot_date.strftime(REQUEST_DATE_FORMAT),
                        slotIDs=[c.slot_id for c in group],
                        slotStatus=_WIRE_STATUS[target],
                    ),
                )
                for change in group:
                    self._server[change.slot_id] = self._server[change.slot_id].model_copy(
                        update={"status": change.to_status}
                    )
                    self._pending.pop(change.slot_id, None)
                saved.extend(group)
        except Exception:
            logger.warning(
                "Saving slot changes for turf %s failed – rolled back %d of %d",
                self.turf_id,
                len(self._pending),
                len(changes),
            )
            self._pending.clear()
            raise

        logger.info("Saved %d slot change(s) for turf %s on %s", len(saved), self.turf_id, self.slot_date)
        return saved


class SlotBoardStore:
    """One active board per admin.

    Loading slots for another (turf, date) replaces the admin's board and
    drops whatever was unsaved on the previous one.
    """

    def __init__(self) -> None:
        self._boards: dict[str, SlotChangeQueue] = {}

    def replace(self, owner: str, queue: SlotChangeQueue) -> SlotChangeQueue:
        previous = self._boards.get(owner)
        if previous is not None and previous.pending():
            logger.info("Board for %s replaced with unsaved changes", owner)
        self._boards[owner] = queue
        return queue

    def get(self, owner: str, turf_id: str, slot_date: date | None = None) -> SlotChangeQueue | None:
        queue = self._boards.get(owner)
        if queue is None or queue.turf_id != turf_id:
            return None
        if slot_date is not None and queue.slot_date != slot_date:
            return None
        return queue

    def drop(self, owner: str) -> None:
        self._boards.pop(owner, None)
