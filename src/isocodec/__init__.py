"""isocodec: ISO 8583 Message Codec

A Python library for decoding and encoding ISO 8583 financial transaction
messages: a 4-character MTI, a 16-character hex primary bitmap, then the
fields the bitmap flags, laid out by a table of field descriptors.

Key Features:
- Pydantic-based message model
- Explicit 128-slot presence bitmap
- Immutable, data-driven field descriptor registry
- Configurable handling of flagged fields with no descriptor

Quick Start:
    >>> from isocodec import Message, generate, parse
    >>>
    >>> msg = Message.build("0800", {3: "123456"})
    >>> wire = generate(msg)
    >>> wire
    '08002000000000000000123456'
    >>> parse(wire).fields
    {3: '123456'}
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import (
    DEFAULT_REGISTRY,
    Bitmap,
    FieldDescriptor,
    FieldDescriptorRegistry,
    FieldType,
    decode_bitmap,
    encode_bitmap,
    generate,
    parse,
)
from .config import CodecConfig, UnknownFieldPolicy
from .exceptions import (
    DescriptorError,
    FormatError,
    IsoCodecError,
    LengthError,
    RangeError,
    UnknownFieldError,
)
from .models import Message

__all__ = [
    # Core API
    "Message",
    "parse",
    "generate",
    # Bitmap
    "Bitmap",
    "decode_bitmap",
    "encode_bitmap",
    # Descriptors
    "FieldDescriptor",
    "FieldDescriptorRegistry",
    "FieldType",
    "DEFAULT_REGISTRY",
    # Configuration
    "CodecConfig",
    "UnknownFieldPolicy",
    # Exceptions
    "IsoCodecError",
    "LengthError",
    "FormatError",
    "RangeError",
    "UnknownFieldError",
    "DescriptorError",
    # Version
    "__version__",
]
