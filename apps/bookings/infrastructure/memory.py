"""In-memory stores, used by tests and by callers that hold catalogs in memory."""

from itertools import count
from typing import Iterable, List, Optional

from apps.bookings.domain.entities import Booking, Room
from apps.bookings.domain.repositories import BookingStore, RoomStore


class InMemoryRoomStore(RoomStore):
    def __init__(self, rooms: Optional[Iterable[Room]] = None):
        self._rooms: List[Room] = list(rooms or [])

    def get_all(self) -> List[Room]:
        return list(self._rooms)


class InMemoryBookingStore(BookingStore):
    """List-backed booking store; ids continue after the highest seeded id."""

    def __init__(self, bookings: Optional[Iterable[Booking]] = None):
        self._bookings: List[Booking] = list(bookings or [])
        last_id = max((b.id for b in self._bookings if b.id is not None), default=0)
        self._ids = count(last_id + 1)

    def get_all(self) -> List[Booking]:
        return list(self._bookings)

    def add(self, booking: Booking) -> Booking:
        booking.id = next(self._ids)
        self._bookings.append(booking)
        return booking
