"""
Shared Kernel

This module contains base classes and utilities shared across the booking
domain: entity and value object bases, the DateRange value object and the
unit of work used by the persistence collaborators.
"""
