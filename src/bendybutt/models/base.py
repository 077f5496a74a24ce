"""Shared Pydantic configuration for decoded bendybutt models.

This module provides the BendyModel class that all decoded message records inherit from.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BendyModel(BaseModel):
    """Base class for decoded Bendy Butt records.

    Records are immutable value objects: equal field values mean equal records,
    and instances are hashable so they can be compared after a round trip.

    Example:
        >>> class Ping(BendyModel):
        ...     author: str
        >>> Ping(author="@abc=.bbfeed-v1") == Ping(author="@abc=.bbfeed-v1")
        True
    """

    model_config = ConfigDict(
        # Immutable after construction
        frozen=True,
        # Forbid extra fields not defined in schema
        extra="forbid",
        # Accept both field names and aliases (e.g. feed_type / "type")
        populate_by_name=True,
        # Lax by default; integer fields opt into strict mode via SignedInt
        strict=False,
    )
