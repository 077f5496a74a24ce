"""Exception hierarchy for bendybutt.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BendyButtError for easy catching of any bendybutt-specific error.
"""

from __future__ import annotations


class BendyButtError(Exception):
    """Base exception for all bendybutt errors."""

    pass


class EncodeError(BendyButtError):
    """Raised when encoding a message fails.

    Examples:
        - Invalid base64 payload in an identifier
        - Integer outside the range of its wire field
        - Value that has no tagged-binary representation (e.g. a float)
    """

    pass


class SuffixMismatchError(EncodeError):
    """Raised when a string's sigil or suffix does not match the expected type.

    Examples:
        - ``author`` ending in ``.sha256`` instead of a feed suffix
        - Private content ending in ``.sig.ed25519`` instead of ``.box2``
    """

    pass


class DecodeError(BendyButtError):
    """Raised when decoding binary data fails."""

    pass


class TagUnknownError(DecodeError):
    """Raised when a tagged buffer carries a type/format pair not in the type table."""

    pass


class ShapeMismatchError(DecodeError):
    """Raised when the container does not match the fixed message shape.

    Examples:
        - Not valid bencode (truncated data, junk after the end)
        - Outer list with the wrong arity
        - Integer where a buffer is expected
        - Unknown content variant key
    """

    pass


class ProjectionError(DecodeError):
    """Raised when a decoded tagged value cannot take its external form.

    Examples:
        - ``author`` buffer tagged as a message id
        - Feed announcement missing the ``nonce`` key
        - Non-string value where a string is required
    """

    pass
