"""ISO 8583 message parser.

This module provides the parse() function that turns a wire string into a
Message.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import DEFAULT_CONFIG, CodecConfig, UnknownFieldPolicy
from ..exceptions import FormatError, LengthError, RangeError, UnknownFieldError
from ..models.message import Message
from .bitmap import BITMAP_HEX_LENGTH, PRIMARY_BITS, decode_bitmap
from .descriptors import FieldDescriptor

logger = logging.getLogger(__name__)

MTI_LENGTH = 4
HEADER_LENGTH = MTI_LENGTH + BITMAP_HEX_LENGTH
LENGTH_PREFIX_DIGITS = 2

# Field 63 swallows whatever is left of the message and ends the parse
REMAINDER_FIELD = 63
# Field 43 is read as 40 bytes whatever its descriptor says
FIXED_OVERRIDES = {43: 40}

_DECIMAL_DIGITS = frozenset("0123456789")
# ASCII whitespace only; FS/GS/RS/US (0x1C-0x1F) are subfield separators and are kept
_TRIM_CHARS = " \t\n\r\v\f"


def parse(wire: str, config: Optional[CodecConfig] = None) -> Message:
    """Parse an ISO 8583 wire string into a Message.

    The wire layout is ``MTI(4) ++ bitmap(16 hex) ++ field data``. Fields flagged
    in the bitmap are read in ascending field-number order using the descriptors
    in ``config.registry``. Bytes left over after the last field are ignored.

    Args:
        wire: Complete message string
        config: Codec configuration (defaults to DEFAULT_CONFIG)

    Returns:
        Parsed message

    Raises:
        LengthError: If the wire string is shorter than MTI + bitmap
        FormatError: If the bitmap or a length prefix is malformed
        RangeError: If a field runs past the end of the data
        UnknownFieldError: If a flagged field has no descriptor and the policy is ERROR

    Examples:
        ```python
        from isocodec import parse

        msg = parse("08002000000000000000123456")
        msg.mti        # '0800'
        msg.fields     # {3: '123456'}
        ```
    """
    if config is None:
        config = DEFAULT_CONFIG

    if len(wire) < HEADER_LENGTH:
        raise LengthError(
            f"Message too short: got {len(wire)} characters, need at least {HEADER_LENGTH}"
        )

    mti = wire[:MTI_LENGTH]
    bitmap = decode_bitmap(wire[MTI_LENGTH:HEADER_LENGTH])
    data = wire[HEADER_LENGTH:]

    fields: dict[int, str] = {}
    position = 0

    for field_number in range(1, PRIMARY_BITS + 1):
        if not bitmap[field_number - 1]:
            continue

        descriptor = config.registry.lookup(field_number)
        if descriptor is None:
            if config.unknown_fields is UnknownFieldPolicy.ERROR:
                raise UnknownFieldError(field_number)
            logger.warning(
                "Field %d is flagged but has no descriptor; skipped without consuming data "
                "(later fields may be misaligned)",
                field_number,
            )
            continue

        if field_number == REMAINDER_FIELD:
            fields[field_number] = data[position:]
            logger.debug(
                "Field %d consumed remaining %d characters",
                field_number,
                len(data) - position,
            )
            position = len(data)
            break

        if descriptor.variable:
            value, position = _read_variable(data, position, field_number, descriptor)
        else:
            value, position = _read_fixed(data, position, field_number, descriptor)

        fields[field_number] = value
        logger.debug("Field %d = %r", field_number, value)

    if position < len(data):
        logger.debug("Discarding %d trailing characters", len(data) - position)

    return Message(mti=mti, bitmap=bitmap, fields=fields)


def _read_variable(
    data: str, position: int, field_number: int, descriptor: FieldDescriptor
) -> tuple[str, int]:
    """Read a length-prefixed field.

    Returns:
        Tuple of (value, new position)

    Raises:
        FormatError: If the length prefix is truncated or not decimal
        RangeError: If the prefixed length exceeds the remaining data
    """
    prefix_end = position + LENGTH_PREFIX_DIGITS
    if prefix_end > len(data):
        raise FormatError(
            f"Field {field_number}: truncated length prefix at offset {position}"
        )

    prefix = data[position:prefix_end]
    if not all(char in _DECIMAL_DIGITS for char in prefix):
        raise FormatError(f"Field {field_number}: invalid length prefix {prefix!r}")
    length = int(prefix)

    value_end = prefix_end + length
    if value_end > len(data):
        raise RangeError(
            f"Field {field_number}: length {length} at offset {prefix_end} exceeds "
            f"remaining {len(data) - prefix_end} characters"
        )

    value = data[prefix_end:value_end]
    if descriptor.trims_whitespace:
        value = value.strip(_TRIM_CHARS)
    return value, value_end


def _read_fixed(
    data: str, position: int, field_number: int, descriptor: FieldDescriptor
) -> tuple[str, int]:
    """Read a fixed-length field.

    Returns:
        Tuple of (value, new position)

    Raises:
        RangeError: If the field runs past the end of the data
    """
    length = FIXED_OVERRIDES.get(field_number, descriptor.length)
    value_end = position + length
    if value_end > len(data):
        raise RangeError(
            f"Field {field_number}: fixed length {length} at offset {position} exceeds "
            f"remaining {len(data) - position} characters"
        )
    return data[position:value_end], value_end
