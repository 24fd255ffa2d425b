"""Unit of work that hands out the stores used for booking creation."""

from shared.application.uow import DjangoUnitOfWork
from apps.bookings.infrastructure.repositories import DjangoBookingStore, DjangoRoomStore


class BookingUnitOfWork(DjangoUnitOfWork):
    """
    Transaction with a locked room catalog

    The room store locks every room row for the duration of the
    transaction. Two concurrent booking creations therefore read the
    bookings table one after the other and cannot both choose the same
    room for overlapping dates.
    """

    def __enter__(self):
        super().__enter__()
        self.rooms = DjangoRoomStore(lock=True)
        self.bookings = DjangoBookingStore()
        return self
