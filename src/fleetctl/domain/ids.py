"""Vehicle identifier generation and boundary parsing.

Identifiers are random 128-bit UUIDs. Callers outside the core pass the
canonical string form; it is parsed here before reaching the store.

INVARIANT: IDs are permanent. Once generated, an ID never changes.
"""

from __future__ import annotations

import re
import uuid

# Canonical 8-4-4-4-12 hex form, case-insensitive.
ID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def new_vehicle_id() -> uuid.UUID:
    """Generate a fresh random vehicle ID."""
    return uuid.uuid4()


def parse_vehicle_id(raw: object) -> uuid.UUID | None:
    """Parse *raw* into a UUID, or return None when it is malformed.

    Only the canonical hyphenated form is accepted. ``uuid.UUID`` itself
    also takes braces, ``urn:uuid:`` prefixes and bare hex, none of which
    are ever produced by :func:`format_vehicle_id`.  Anything that is
    neither a string nor a UUID is malformed.
    """
    if isinstance(raw, uuid.UUID):
        return raw
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    if not ID_PATTERN.match(text):
        return None
    return uuid.UUID(text)


def format_vehicle_id(vehicle_id: uuid.UUID) -> str:
    """Serialize *vehicle_id* in canonical string form."""
    return str(vehicle_id)
