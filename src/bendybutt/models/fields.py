"""Field type helpers for decoded messages.

The wire format stores ``sequence`` as a signed 32-bit and ``timestamp`` as a
signed 64-bit integer. Only the width is enforced; positivity and ordering are
left to the feed layer.
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo


def SignedInt(*, bits: int, **kwargs: Any) -> FieldInfo:
    """Create an integer field bounded to a two's complement width.

    Args:
        bits: Width in bits (e.g. 32, 64)
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Record(BendyModel):
        ...     sequence: Annotated[int, SignedInt(bits=32)]
    """
    if bits < 2:
        raise ValueError(f"bits must be >= 2, got {bits}")
    return cast(
        FieldInfo,
        Field(ge=-(1 << (bits - 1)), le=(1 << (bits - 1)) - 1, strict=True, **kwargs),
    )


Int32 = Annotated[int, SignedInt(bits=32)]
Int64 = Annotated[int, SignedInt(bits=64)]
