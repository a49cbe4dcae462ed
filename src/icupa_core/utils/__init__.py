"""Utilities module for icupa-core."""

from .uuid import generate_uuid_v7, utc_now
from .passwords import hash_password, verify_password

__all__ = [
    "generate_uuid_v7",
    "utc_now",
    "hash_password",
    "verify_password",
]
