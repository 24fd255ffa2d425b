"""
Booking Command Handlers

Use cases that change booking state. They run the availability engine
inside a unit of work.

Commands:
- CreateBookingCommand: Book the first free room for a date range
"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional
import logging

from django.utils import timezone

from apps.bookings.application.uow import BookingUnitOfWork
from apps.bookings.domain.availability import AvailabilityEngine
from apps.bookings.domain.entities import Booking

logger = logging.getLogger(__name__)


# ===== Commands =====

@dataclass
class CreateBookingCommand:
    """
    Command to create a new booking

    The room is not part of the command: the engine picks it.
    """
    start_date: date
    end_date: date
    customer_id: Optional[int] = None


# ===== Command Handlers =====

class CreateBookingHandler:
    """
    Handler for CreateBooking command

    Steps:
    1. Start database transaction (atomic)
    2. Lock the room catalog (SELECT FOR UPDATE)
    3. Let the engine pick a free room and append the booking
    4. Commit transaction
    """

    def __init__(
        self,
        uow_factory: Callable[[], BookingUnitOfWork] = BookingUnitOfWork,
        today: Callable[[], date] = timezone.localdate,
    ):
        self.uow_factory = uow_factory
        self.today = today

    def handle(self, command: CreateBookingCommand) -> Optional[Booking]:
        """
        Handle booking creation

        Returns: The persisted Booking, or None when the dates are invalid
        or no room is free
        """
        logger.info(
            f"Creating booking for customer {command.customer_id}, "
            f"dates {command.start_date} - {command.end_date}"
        )

        booking = Booking(
            command.start_date,
            command.end_date,
            customer_id=command.customer_id,
        )

        with self.uow_factory() as uow:
            engine = AvailabilityEngine(uow.bookings, uow.rooms, today=self.today)
            created = engine.create_booking(booking)

        if not created:
            logger.info(
                f"No booking created for dates {command.start_date} - {command.end_date}"
            )
            return None

        logger.info(f"Booking created successfully: {booking.id} (room {booking.room_id})")
        return booking
