"""Read-only availability queries over the database stores."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from django.utils import timezone  # type: ignore

from apps.bookings.domain.availability import AvailabilityEngine
from apps.bookings.infrastructure.repositories import DjangoBookingStore, DjangoRoomStore


def _engine() -> AvailabilityEngine:
    return AvailabilityEngine(DjangoBookingStore(), DjangoRoomStore(), today=timezone.localdate)


def find_available_room(start_date: date, end_date: date) -> Optional[int]:
    """Id of the first room free for the whole range, or None."""

    return _engine().find_available_room(start_date, end_date)


def get_fully_occupied_dates(start_date: date, end_date: date) -> List[date]:
    """Dates in the range on which every room is booked."""

    return _engine().get_fully_occupied_dates(start_date, end_date)
