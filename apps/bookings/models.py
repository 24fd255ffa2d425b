"""Persistence models for rooms, customers and bookings."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.bookings.domain import entities


class Room(models.Model):
    """Room from the hotel catalog."""

    description = models.CharField(max_length=255)

    class Meta:
        ordering = ("id",)
        verbose_name = _("Room")
        verbose_name_plural = _("Rooms")

    def __str__(self) -> str:
        return self.description

    def to_domain(self) -> entities.Room:
        return entities.Room(id=self.pk, description=self.description)


class Customer(models.Model):
    """Guest who owns bookings. Opaque to availability decisions."""

    name = models.CharField(max_length=255)
    email = models.EmailField(blank=True)

    def __str__(self) -> str:
        return self.name


class Booking(models.Model):
    """Reservation of one room for an inclusive date range."""

    room = models.ForeignKey(
        Room,
        on_delete=models.PROTECT,
        related_name="bookings",
    )
    customer = models.ForeignKey(
        Customer,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="bookings",
    )
    start_date = models.DateField()
    end_date = models.DateField(help_text=_("Last booked day, inclusive."))
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("id",)
        indexes = [
            models.Index(
                fields=["room", "start_date", "end_date"],
                name="bookings_room_dates_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"Booking #{self.pk} ({self.room_id}: {self.start_date} - {self.end_date})"

    def to_domain(self) -> entities.Booking:
        return entities.Booking(
            self.start_date,
            self.end_date,
            id=self.pk,
            room_id=self.room_id,
            customer_id=self.customer_id,
            is_active=self.is_active,
        )
