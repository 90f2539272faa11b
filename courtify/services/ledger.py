"""
Flat-file booking ledger.

Bookings are kept as a JSON array on disk. Creation is load → append →
store, serialized behind a lock so two concurrent bookings can never
overwrite each other. Records are never updated or deleted, and no
double-booking check is made.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from courtify.errors import CourtifyError, ValidationError
from courtify.models import BookingRecord, ProviderId

logger = logging.getLogger(__name__)

BOOKING_STATUS = "confirmed_mock"
_ID_PREFIX = "bk-"


def new_booking_id() -> str:
    return f"{_ID_PREFIX}{uuid.uuid4().hex}"


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


class BookingLedger:
    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    # ── Lifecycle ──────────────────────────────────────────────────────

    def ensure_file(self) -> None:
        """Create an empty ledger file if none exists yet."""
        if self._path.exists():
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._write([])
        logger.info("Created booking ledger at %s", self._path)

    # ── Disk I/O ───────────────────────────────────────────────────────

    def _read(self, *, strict: bool = False) -> list[dict[str, Any]]:
        """Load all rows. Unreadable content is an error when *strict*, else empty."""
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        try:
            data = json.loads(raw or "[]")
        except json.JSONDecodeError:
            return self._unreadable("is not valid JSON", strict)
        if not isinstance(data, list):
            return self._unreadable("does not hold a list", strict)
        return data

    def _unreadable(self, reason: str, strict: bool) -> list[dict[str, Any]]:
        if strict:
            raise CourtifyError(f"Booking ledger {self._path} {reason}; refusing to overwrite it")
        logger.warning("Booking ledger %s %s; treating as empty", self._path, reason)
        return []

    def _write(self, rows: list[dict[str, Any]]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".bookings-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(rows, fh, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def _append(self, row: dict[str, Any]) -> None:
        rows = self._read(strict=True)
        rows.append(row)
        self._write(rows)

    # ── Public API ─────────────────────────────────────────────────────

    async def create(
        self,
        service_id: ProviderId | None,
        unit_id: ProviderId | None,
        date: str | None,
        time: str | None,
        customer_name: str | None,
        service_name: str | None = None,
        unit_name: str | None = None,
        contact: str | None = None,
        price: float | str | None = None,
    ) -> BookingRecord:
        required = (service_id, unit_id, date, time, customer_name)
        if any(_is_missing(v) for v in required):
            raise ValidationError("Missing required fields")

        booking = BookingRecord(
            id=new_booking_id(),
            serviceId=service_id,
            serviceName=service_name,
            unitId=unit_id,
            unitName=unit_name,
            date=date,
            time=time,
            customerName=customer_name,
            contact=contact or "",
            price=price or None,
            status=BOOKING_STATUS,
            createdAt=datetime.now(timezone.utc).isoformat(),
        )

        async with self._lock:
            await asyncio.to_thread(self._append, booking.model_dump())

        logger.info(
            "Booking %s created: service=%s unit=%s %s %s",
            booking.id,
            booking.serviceId,
            booking.unitId,
            booking.date,
            booking.time,
        )
        return booking

    async def list(self) -> list[BookingRecord]:
        """All bookings in creation order."""
        rows = await asyncio.to_thread(self._read)
        return [BookingRecord.model_validate(row) for row in rows]
