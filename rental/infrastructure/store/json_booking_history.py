from __future__ import annotations

import json
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Any

from rental.application.ports.booking_history import BookingHistoryPort
from rental.domain.entities.booking import Booking


class JsonBookingHistory(BookingHistoryPort):
    def __init__(self, data_dir: str = "./data", filename: str = "bookings.json") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._file_path = self._data_dir / filename
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def append_booking(self, booking: Booking) -> None:
        with self._lock:
            records = self._load()
            records.insert(0, self._serialize(booking))
            self._save(records)

    def list_bookings(self, car_id: str | None = None) -> list[Booking]:
        with self._lock:
            records = self._load()

        bookings: list[Booking] = []
        for record in records:
            try:
                booking = self._deserialize(record)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                self._logger.warning("Skipping malformed booking record", extra={"error": str(e)})
                continue
            if car_id is None or booking.car_id == car_id:
                bookings.append(booking)
        return bookings

    def _load(self) -> list[Any]:
        """Load records newest first. An undecodable file is moved aside and reads as empty."""
        if not self._file_path.exists():
            return []
        try:
            with open(self._file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            self._quarantine(str(e))
            return []

        records = data.get("bookings") if isinstance(data, dict) else None
        if not isinstance(records, list):
            self._quarantine("missing bookings list")
            return []
        return records

    def _quarantine(self, reason: str) -> None:
        stamp = datetime.now().strftime("%Y%m%d%H%M%S%f")
        target = self._file_path.with_name(f"{self._file_path.name}.corrupt-{stamp}")
        self._file_path.replace(target)
        self._logger.warning(
            "Booking history unreadable, moved aside",
            extra={"error": reason, "reason": target.name},
        )

    def _save(self, records: list[Any]) -> None:
        """Write atomically via a temp file and rename."""
        temp_path = self._file_path.with_suffix(".json.tmp")
        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump({"bookings": records, "version": 1}, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._file_path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise

    def _serialize(self, booking: Booking) -> dict[str, Any]:
        return {
            "id": booking.id,
            "reference_code": booking.reference_code,
            "car_id": booking.car_id,
            "start_date": booking.start_date,
            "end_date": booking.end_date,
            "total_price": booking.total_price,
            "currency": booking.currency,
            "status": booking.status,
            "booked_at": booking.booked_at.isoformat() if booking.booked_at else None,
        }

    def _deserialize(self, data: dict[str, Any]) -> Booking:
        booked_at = data.get("booked_at")
        return Booking(
            id=data["id"],
            reference_code=data.get("reference_code", ""),
            car_id=data["car_id"],
            start_date=data["start_date"],
            end_date=data["end_date"],
            total_price=int(data.get("total_price", 0)),
            currency=data.get("currency", "IDR"),
            status=data.get("status", "upcoming"),
            booked_at=datetime.fromisoformat(booked_at) if booked_at else None,
        )
