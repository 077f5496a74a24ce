"""BFE type table.

Every tagged buffer starts with two bytes: the *type* (feed, message, blob,
signature, box, generic) and the *format* within that type. Identifier formats
also carry the textual sigil and suffix used by their external string form, so
that a buffer can be turned back into exactly the string it came from.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union


class BfeType(enum.IntEnum):
    """First tag byte."""

    FEED = 0x00
    MSG = 0x01
    BLOB = 0x02
    SIGNATURE = 0x04
    BOX = 0x05
    GENERIC = 0x06


@dataclass(frozen=True)
class BfeFormat:
    """One entry of the type table.

    Attributes:
        type: Semantic type (first tag byte)
        code: Format within the type (second tag byte)
        name: Human-readable format name
        sigil: Leading character of the external form ('' if none)
        suffix: Trailing text of the external form ('' for generic values)
    """

    type: BfeType
    code: int
    name: str
    sigil: str = ""
    suffix: str = ""

    @property
    def tag(self) -> bytes:
        """The two tag bytes that prefix a buffer of this format."""
        return bytes([self.type, self.code])


FEED_CLASSIC = BfeFormat(BfeType.FEED, 0x00, "classic", "@", ".ed25519")
FEED_GABBYGROVE = BfeFormat(BfeType.FEED, 0x01, "gabbygrove-v1", "@", ".ggfeed-v1")
FEED_BENDYBUTT = BfeFormat(BfeType.FEED, 0x02, "bendybutt-v1", "@", ".bbfeed-v1")

MSG_CLASSIC = BfeFormat(BfeType.MSG, 0x00, "classic", "%", ".sha256")
MSG_GABBYGROVE = BfeFormat(BfeType.MSG, 0x01, "gabbygrove-v1", "%", ".ggmsg-v1")
MSG_CLOAKED = BfeFormat(BfeType.MSG, 0x02, "cloaked", "%", ".cloaked")
MSG_BENDYBUTT = BfeFormat(BfeType.MSG, 0x03, "bendybutt-v1", "%", ".bbmsg-v1")

BLOB_CLASSIC = BfeFormat(BfeType.BLOB, 0x00, "classic", "&", ".sha256")

SIG_ED25519 = BfeFormat(BfeType.SIGNATURE, 0x00, "msg-ed25519", "", ".sig.ed25519")

BOX_BOX1 = BfeFormat(BfeType.BOX, 0x00, "box1", "", ".box")
BOX_BOX2 = BfeFormat(BfeType.BOX, 0x01, "box2", "", ".box2")

GENERIC_STRING = BfeFormat(BfeType.GENERIC, 0x00, "string-UTF8")
GENERIC_BOOLEAN = BfeFormat(BfeType.GENERIC, 0x01, "boolean")
GENERIC_NIL = BfeFormat(BfeType.GENERIC, 0x02, "nil")
GENERIC_BYTES = BfeFormat(BfeType.GENERIC, 0x03, "any-bytes")

FORMATS: tuple[BfeFormat, ...] = (
    FEED_CLASSIC,
    FEED_GABBYGROVE,
    FEED_BENDYBUTT,
    MSG_CLASSIC,
    MSG_GABBYGROVE,
    MSG_CLOAKED,
    MSG_BENDYBUTT,
    BLOB_CLASSIC,
    SIG_ED25519,
    BOX_BOX1,
    BOX_BOX2,
    GENERIC_STRING,
    GENERIC_BOOLEAN,
    GENERIC_NIL,
    GENERIC_BYTES,
)

FORMATS_BY_TAG: dict[bytes, BfeFormat] = {fmt.tag: fmt for fmt in FORMATS}

# A tagged value as it sits inside the container: a tagged buffer, a plain
# integer, or a list/dict of tagged values (dict keys are UTF-8 bytes).
TaggedValue = Union[bytes, int, list["TaggedValue"], dict[bytes, "TaggedValue"]]


def formats_of(bfe_type: BfeType) -> tuple[BfeFormat, ...]:
    """Return all formats belonging to a type, in table order."""
    return tuple(fmt for fmt in FORMATS if fmt.type is bfe_type)


def lookup_tag(tag: bytes) -> Optional[BfeFormat]:
    """Return the format for a two-byte tag, or None if it is not in the table."""
    return FORMATS_BY_TAG.get(bytes(tag[:2]))
