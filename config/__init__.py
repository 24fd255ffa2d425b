"""Top-level package for Django configuration.

This package holds the settings modules of the HotelBooking project for
the different environments.
"""
