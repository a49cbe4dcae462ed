"""Bookings services."""

from .booking_use_cases import BookingUseCases

__all__ = ["BookingUseCases"]
