"""
Availability Engine

This is the component that decides room availability and occupancy.
All room selection for new bookings MUST go through it: create_booking is
the only guard against double booking a room.

Every operation takes a fresh snapshot from the stores, computes in memory
and returns. Nothing is cached between calls.
"""

import logging
from datetime import date
from typing import Callable, List, Optional, Sequence

from apps.bookings.domain.entities import Booking, Room
from apps.bookings.domain.repositories import BookingStore, RoomStore
from shared.domain.value_objects import DateRange, as_date

logger = logging.getLogger(__name__)


class InvalidRange(ValueError):
    """Raised when a requested date range starts in the past or ends before it starts."""


class AvailabilityEngine:
    """
    Room availability and occupancy decisions

    Usage:
        engine = AvailabilityEngine(booking_store, room_store)

        room_id = engine.find_available_room(check_in, check_out)
        if room_id is None:
            ...  # nothing free for the whole range

        if engine.create_booking(Booking(check_in, check_out, customer_id=42)):
            ...  # booking persisted with the chosen room

        busy_days = engine.get_fully_occupied_dates(month_start, month_end)
    """

    def __init__(
        self,
        booking_store: BookingStore,
        room_store: RoomStore,
        today: Callable[[], date] = date.today,
    ):
        self.booking_store = booking_store
        self.room_store = room_store
        self._today = today

    def validate_range(self, start_date: date, end_date: date) -> DateRange:
        """
        Check a requested range and return it as a DateRange

        Only calendar dates are compared; time-of-day is ignored.

        Raises:
            InvalidRange: If start is before today or end is before start
        """
        start = as_date(start_date)
        end = as_date(end_date)
        today = as_date(self._today())

        if start < today:
            raise InvalidRange(f"Start date {start} is in the past (today is {today})")
        if end < start:
            raise InvalidRange(f"End date {end} is before start date {start}")

        return DateRange(start, end)

    def find_available_room(self, start_date: date, end_date: date) -> Optional[int]:
        """
        Find a room that is free for the whole range

        Returns the id of the first free room in room store order, or None
        when every room has an active booking overlapping the range.

        Raises:
            InvalidRange: If the range fails validation
        """
        dates = self.validate_range(start_date, end_date)
        return self._first_free_room(
            self.room_store.get_all(),
            self.booking_store.get_all(),
            dates,
        )

    def create_booking(self, booking: Booking) -> bool:
        """
        Book the first free room for the booking's dates

        The room is chosen by the engine and written to booking.room_id.
        Returns False, without writing anything, when the range is invalid
        or no room is free. Store errors from add() propagate unchanged.
        """
        try:
            dates = self.validate_range(booking.start_date, booking.end_date)
        except InvalidRange as e:
            logger.debug(f"Booking rejected: {e}")
            return False

        booking.is_active = True

        room_id = self._first_free_room(
            self.room_store.get_all(),
            self.booking_store.get_all(),
            dates,
        )
        if room_id is None:
            logger.debug(f"Booking rejected: no room free for {dates}")
            return False

        booking.room_id = room_id
        self.booking_store.add(booking)

        logger.info(f"Booking {booking.id} created for room {room_id}, dates {dates}")
        return True

    def get_fully_occupied_dates(self, start_date: date, end_date: date) -> List[date]:
        """
        List the dates on which every room is booked

        Dates are returned in ascending order. An empty room catalog is
        never fully occupied.

        Raises:
            InvalidRange: If the range fails validation
        """
        dates = self.validate_range(start_date, end_date)

        rooms = list(self.room_store.get_all())
        if not rooms:
            return []

        bookings = [b for b in self.booking_store.get_all() if b.is_active]

        return [
            day for day in dates.days()
            if all(
                any(b.covers(room.id, day) for b in bookings)
                for room in rooms
            )
        ]

    @staticmethod
    def _first_free_room(
        rooms: Sequence[Room],
        bookings: Sequence[Booking],
        dates: DateRange,
    ) -> Optional[int]:
        active = [b for b in bookings if b.is_active]
        for room in rooms:
            if not any(b.blocks(room.id, dates) for b in active):
                return room.id
        return None
