"""Listings services."""

from .listing_use_cases import ListingUseCases

__all__ = ["ListingUseCases"]
