"""ISO 8583 message generator.

This module provides the generate() function that serializes a Message back
to a wire string.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..config import DEFAULT_CONFIG, CodecConfig
from ..models.message import Message
from .bitmap import PRIMARY_BITS, encode_bitmap

logger = logging.getLogger(__name__)


def generate(message: Message, config: Optional[CodecConfig] = None) -> str:
    """Serialize a Message to an ISO 8583 wire string.

    Fields flagged in the primary bitmap are written in ascending field-number
    order. Nothing is validated: fixed fields are written exactly as stored (no
    padding or truncation), a flagged field with no value is written empty, and
    flags 65-128 are dropped.

    Unlike parse(), there is no special handling for field 43 (not forced to 40
    characters) or field 63 (length-prefixed like any variable field).

    Args:
        message: Message to serialize
        config: Codec configuration (defaults to DEFAULT_CONFIG)

    Returns:
        Wire string

    Examples:
        ```python
        from isocodec import Message, generate

        msg = Message.build("0800", {2: "4111111111111111"})
        generate(msg)  # '0800400000000000000016' + '4111111111111111'
        ```
    """
    if config is None:
        config = DEFAULT_CONFIG

    parts = [message.mti, encode_bitmap(message.bitmap)]

    for field_number in range(1, PRIMARY_BITS + 1):
        if not message.bitmap[field_number - 1]:
            continue

        value = message.fields.get(field_number, "")
        descriptor = config.registry.lookup(field_number)

        if descriptor is not None and descriptor.variable:
            # Lengths of 100 or more overflow the 2-digit prefix
            parts.append(f"{len(value):02d}")
        elif descriptor is None:
            logger.debug("Field %d has no descriptor; written as raw value", field_number)

        parts.append(value)

    return "".join(parts)
