"""Identifier generation."""

from uuid import uuid4


def new_id() -> str:
    """Return a new opaque, collision-resistant identifier."""
    return uuid4().hex
