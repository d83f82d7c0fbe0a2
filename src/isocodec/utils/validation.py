"""Field content and message consistency checks.

The codec itself does not validate field content; these helpers are for
callers that want to.
"""

from __future__ import annotations

from ..codec.bitmap import BITMAP_SIZE, Bitmap
from ..models.message import Message

_DECIMAL_DIGITS = frozenset("0123456789")


def validate_numeric_field(value: str) -> bool:
    """Return True if the value is non-empty and only ASCII digits."""
    return bool(value) and all(char in _DECIMAL_DIGITS for char in value)


def validate_field_length(value: str, max_length: int) -> bool:
    """Return True if the value is no longer than ``max_length``."""
    return len(value) <= max_length


def is_field_present(bitmap: Bitmap, field_number: int) -> bool:
    """Return True if the field is flagged; False for numbers outside 1-128."""
    if not 1 <= field_number <= BITMAP_SIZE:
        return False
    return bitmap.is_set(field_number)


def unparsed_fields(message: Message) -> list[int]:
    """Return field numbers flagged in the bitmap but missing from ``fields``.

    After parse() with UnknownFieldPolicy.SKIP this lists fields that were
    skipped for lack of a descriptor, plus any flags after field 63. An empty
    list means bitmap and fields agree.

    Examples:
        ```python
        from isocodec import parse
        from isocodec.utils import unparsed_fields

        msg = parse("0800" + "A000000000000000" + "123456")  # field 1 unknown
        unparsed_fields(msg)  # [1]
        ```
    """
    return [
        field_number
        for field_number in message.bitmap.present_fields()
        if field_number not in message.fields
    ]
