"""Identifier and clock helpers for entity records."""

import time
import uuid
from datetime import datetime, timezone


def generate_uuid_v7() -> str:
    """
    Generate a UUIDv7 string.

    The leading 48 bits hold the Unix time in milliseconds, so identifiers
    sort by creation time and index well in the relational store.

    Returns:
        Canonical hyphenated UUID string
    """
    timestamp = int(time.time() * 1000).to_bytes(6, byteorder="big")
    tail = bytearray(uuid.uuid4().bytes[6:])
    tail[0] = (tail[0] & 0x0F) | 0x70
    tail[2] = (tail[2] & 0x3F) | 0x80
    return str(uuid.UUID(bytes=timestamp + bytes(tail)))


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
