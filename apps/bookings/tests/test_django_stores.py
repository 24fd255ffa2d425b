"""Tests for the database stores, the unit of work and the booking use cases."""

from __future__ import annotations

from datetime import timedelta

import pytest
from django.db import transaction
from django.utils import timezone

from apps.bookings import models
from apps.bookings.application import queries
from apps.bookings.application.command_handlers import CreateBookingCommand, CreateBookingHandler
from apps.bookings.application.uow import BookingUnitOfWork
from apps.bookings.domain.availability import AvailabilityEngine, InvalidRange
from apps.bookings.domain.entities import Booking
from apps.bookings.infrastructure import repositories
from apps.bookings.infrastructure.repositories import DjangoBookingStore, DjangoRoomStore


def days(n: int):
    return timezone.localdate() + timedelta(days=n)


@pytest.fixture
def catalog(db):
    first = models.Room.objects.create(description="Room 1")
    second = models.Room.objects.create(description="Room 2")
    customer = models.Customer.objects.create(name="Alice", email="alice@example.com")
    for room in (first, second):
        models.Booking.objects.create(
            room=room,
            customer=customer,
            start_date=days(10),
            end_date=days(20),
            is_active=True,
        )
    return first, second, customer


@pytest.mark.django_db
def test_room_store_returns_rooms_in_id_order(catalog):
    first, second, _ = catalog

    rooms = DjangoRoomStore().get_all()

    assert [r.id for r in rooms] == [first.pk, second.pk]
    assert rooms[0].description == "Room 1"


@pytest.mark.django_db
def test_locked_room_store_reads_inside_transaction(catalog):
    first, second, _ = catalog

    with BookingUnitOfWork() as uow:
        assert [r.id for r in uow.rooms.get_all()] == [first.pk, second.pk]


@pytest.mark.django_db
def test_locked_room_store_applies_row_lock(catalog, monkeypatch):
    locked = []

    def spy(queryset):
        locked.append(queryset)
        return original(queryset)

    original = repositories._lock_queryset_if_possible
    monkeypatch.setattr(repositories, "_lock_queryset_if_possible", spy)

    with BookingUnitOfWork() as uow:
        uow.rooms.get_all()

    assert len(locked) == 1


@pytest.mark.django_db
def test_plain_room_store_does_not_lock(catalog, monkeypatch):
    monkeypatch.setattr(
        repositories,
        "_lock_queryset_if_possible",
        lambda queryset: pytest.fail("room catalog must not be locked"),
    )

    assert len(DjangoRoomStore().get_all()) == 2


@pytest.mark.django_db
def test_lock_helper_selects_for_update_inside_atomic_block():
    with transaction.atomic():
        queryset = repositories._lock_queryset_if_possible(models.Room.objects.all())

    assert queryset.query.select_for_update is True


@pytest.mark.django_db
def test_booking_store_maps_rows_to_entities(catalog):
    first, _, customer = catalog
    models.Booking.objects.filter(room=first).update(is_active=False)

    stored = DjangoBookingStore().get_all()

    assert len(stored) == 2
    assert stored[0].room_id == first.pk
    assert stored[0].customer_id == customer.pk
    assert stored[0].start_date == days(10)
    assert stored[0].end_date == days(20)
    assert stored[0].is_active is False
    assert stored[1].is_active is True


@pytest.mark.django_db
def test_booking_store_add_assigns_id(catalog):
    first, _, customer = catalog
    booking = Booking(days(1), days(2), room_id=first.pk, customer_id=customer.pk)

    DjangoBookingStore().add(booking)

    row = models.Booking.objects.get(pk=booking.id)
    assert row.room_id == first.pk
    assert row.start_date == days(1)
    assert row.is_active is True


@pytest.mark.django_db
def test_unit_of_work_rolls_back_on_error(catalog):
    first, _, _ = catalog

    with pytest.raises(RuntimeError):
        with BookingUnitOfWork() as uow:
            uow.bookings.add(Booking(days(1), days(2), room_id=first.pk))
            raise RuntimeError("boom")

    assert models.Booking.objects.count() == 2


@pytest.mark.django_db
def test_unit_of_work_explicit_rollback_discards_writes(catalog):
    first, _, _ = catalog

    with BookingUnitOfWork() as uow:
        uow.bookings.add(Booking(days(1), days(2), room_id=first.pk))
        uow.rollback()

    assert models.Booking.objects.count() == 2


@pytest.mark.django_db
def test_engine_over_database_stores(catalog):
    engine = AvailabilityEngine(DjangoBookingStore(), DjangoRoomStore(), today=timezone.localdate)

    assert engine.find_available_room(days(10), days(20)) is None
    assert len(engine.get_fully_occupied_dates(days(10), days(20))) == 11


# ===== Use cases =====

@pytest.mark.django_db
def test_create_booking_handler_persists_booking(catalog):
    first, _, customer = catalog

    booking = CreateBookingHandler().handle(
        CreateBookingCommand(days(1), days(2), customer_id=customer.pk)
    )

    assert booking is not None
    row = models.Booking.objects.get(pk=booking.id)
    assert row.room_id == first.pk
    assert row.customer_id == customer.pk
    assert row.is_active is True


@pytest.mark.django_db
def test_create_booking_handler_returns_none_when_full(catalog):
    booking = CreateBookingHandler().handle(CreateBookingCommand(days(11), days(12)))

    assert booking is None
    assert models.Booking.objects.count() == 2


@pytest.mark.django_db
def test_create_booking_handler_returns_none_for_past_dates(catalog):
    assert CreateBookingHandler().handle(CreateBookingCommand(days(-2), days(1))) is None
    assert models.Booking.objects.count() == 2


@pytest.mark.django_db
def test_create_booking_handler_fills_second_room(catalog):
    _, second, _ = catalog
    handler = CreateBookingHandler()

    handler.handle(CreateBookingCommand(days(1), days(3)))
    booking = handler.handle(CreateBookingCommand(days(3), days(4)))

    assert booking is not None
    assert booking.room_id == second.pk
    assert handler.handle(CreateBookingCommand(days(3), days(3))) is None


@pytest.mark.django_db
def test_queries_use_database(catalog):
    first, _, _ = catalog

    assert queries.find_available_room(days(1), days(2)) == first.pk
    assert queries.find_available_room(days(10), days(20)) is None
    assert queries.get_fully_occupied_dates(days(21), days(25)) == []
    assert queries.get_fully_occupied_dates(days(19), days(22)) == [days(19), days(20)]


@pytest.mark.django_db
def test_queries_raise_invalid_range(catalog):
    with pytest.raises(InvalidRange):
        queries.find_available_room(days(-1), days(1))
    with pytest.raises(InvalidRange):
        queries.get_fully_occupied_dates(days(5), days(2))


@pytest.mark.django_db
def test_cancelled_booking_frees_room(catalog):
    first, _, _ = catalog
    models.Booking.objects.filter(room=first).update(is_active=False)

    assert queries.find_available_room(days(12), days(14)) == first.pk
    assert queries.get_fully_occupied_dates(days(10), days(20)) == []
