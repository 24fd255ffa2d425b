"""
Store Interfaces

Capability interfaces the availability engine consumes. Any backing
implementation (in-memory list, Django ORM, remote service) can satisfy them.

Implementations that serve concurrent callers must give each
create_booking call a consistent snapshot and an atomic append, otherwise
two callers can pick the same room for overlapping dates.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from apps.bookings.domain.entities import Booking, Room


class RoomStore(ABC):
    """Read access to the room catalog"""

    @abstractmethod
    def get_all(self) -> Sequence[Room]:
        """
        Return every room

        Iteration order is significant: it is the tie-break order used
        when several rooms are free.
        """


class BookingStore(ABC):
    """Read and append access to bookings"""

    @abstractmethod
    def get_all(self) -> Sequence[Booking]:
        """Return every booking, inactive ones included"""

    @abstractmethod
    def add(self, booking: Booking) -> Booking:
        """Persist a new booking and assign its id"""
