"""Django ORM implementations of the room and booking stores."""

from __future__ import annotations

import logging
from typing import List

from django.db import transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.bookings import models
from apps.bookings.domain.entities import Booking, Room
from apps.bookings.domain.repositories import BookingStore, RoomStore

logger = logging.getLogger(__name__)


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


class DjangoRoomStore(RoomStore):
    """
    Room catalog backed by the Room table, ordered by id

    With lock=True the rows are read with SELECT ... FOR UPDATE, so
    concurrent booking transactions that lock the catalog run one at a time.
    """

    def __init__(self, lock: bool = False):
        self.lock = lock

    def get_all(self) -> List[Room]:
        queryset = models.Room.objects.order_by("id")
        if self.lock:
            queryset = _lock_queryset_if_possible(queryset)
        return [row.to_domain() for row in queryset]


class DjangoBookingStore(BookingStore):
    def get_all(self) -> List[Booking]:
        return [row.to_domain() for row in models.Booking.objects.order_by("id")]

    def add(self, booking: Booking) -> Booking:
        row = models.Booking.objects.create(
            room_id=booking.room_id,
            customer_id=booking.customer_id,
            start_date=booking.start_date,
            end_date=booking.end_date,
            is_active=booking.is_active,
        )
        booking.id = row.pk
        logger.debug(f"Stored booking {row.pk} for room {row.room_id}")
        return booking
