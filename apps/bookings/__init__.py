"""Bookings app package.

This app encapsulates the hotel booking domain: the room catalog, bookings
and the availability engine that picks free rooms, guards against double
bookings and reports fully occupied dates. Database-backed stores serialise
booking creation by locking the room catalog inside a transaction.
"""
