"""Listings feature."""

from .entities import Listing
from .services import ListingUseCases

__all__ = ["Listing", "ListingUseCases"]
