"""Bookings feature."""

from .entities import Booking
from .services import BookingUseCases

__all__ = ["Booking", "BookingUseCases"]
