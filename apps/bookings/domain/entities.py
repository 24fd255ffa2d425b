"""
Booking Domain Entities

Core business entities for the availability domain:
- Room: A bookable room from the room catalog
- Booking: A reservation of one room for an inclusive range of dates
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from shared.domain.base import Entity
from shared.domain.value_objects import DateRange, as_date


@dataclass(eq=False)
class Room(Entity):
    """
    Room entity

    Rooms are owned by the room catalog and are read-only for the
    availability engine.
    """
    description: str = ''

    def __str__(self):
        return self.description or f"Room {self.id}"


@dataclass(eq=False)
class Booking(Entity):
    """
    Booking entity

    Represents a customer's reservation of a room from start_date to
    end_date, both inclusive.

    Key invariants:
    - Only active bookings block room dates
    - Dates are calendar dates; time-of-day is dropped on construction
    """
    start_date: date
    end_date: date
    room_id: Optional[int] = None
    customer_id: Optional[int] = None
    is_active: bool = True

    def __post_init__(self):
        self.start_date = as_date(self.start_date)
        self.end_date = as_date(self.end_date)

    @property
    def dates(self) -> DateRange:
        """Booked period as a DateRange"""
        return DateRange(self.start_date, self.end_date)

    def counts_for(self, room_id: int) -> bool:
        """
        Check if this booking takes part in availability of room_id

        Inactive bookings, bookings of other rooms and stored rows with an
        inverted range (end before start) never count.
        """
        return (self.is_active and
                self.room_id == room_id and
                self.start_date <= self.end_date)

    def blocks(self, room_id: int, dates: DateRange) -> bool:
        """Check if this booking keeps room_id busy for any day of dates"""
        return self.counts_for(room_id) and self.dates.overlaps_with(dates)

    def covers(self, room_id: int, day: date) -> bool:
        """Check if this booking keeps room_id busy on a single day"""
        return self.counts_for(room_id) and self.dates.contains(day)

    def __str__(self):
        return f"Booking {self.id} (room {self.room_id}, {self.start_date} - {self.end_date})"
