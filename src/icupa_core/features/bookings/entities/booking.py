"""Booking domain entity."""

from datetime import datetime
from typing import ClassVar

from pydantic import field_validator

from ....config.constants import BookingStatus
from ....core.entities.base import EntityModel, NonEmptyStr, ensure_utc


class Booking(EntityModel):
    """Reservation of a listing for a time window.

    Dates are normalized to UTC; date-only inputs mean midnight UTC.
    """

    entity_name: ClassVar[str] = "booking"
    table_name: ClassVar[str] = "bookings"

    listing_id: NonEmptyStr
    user_id: NonEmptyStr
    start_date: datetime
    end_date: datetime
    status: BookingStatus = BookingStatus.PENDING

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_timezone(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @property
    def has_valid_window(self) -> bool:
        return self.end_date > self.start_date
