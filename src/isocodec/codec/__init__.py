"""ISO 8583 message codec.

This module provides the bitmap codec, the field descriptor registry, and the
parse/generate pair built on them.
"""

from __future__ import annotations

from .bitmap import Bitmap, decode_bitmap, encode_bitmap
from .descriptors import DEFAULT_REGISTRY, FieldDescriptor, FieldDescriptorRegistry, FieldType
from .generator import generate
from .parser import parse

__all__ = [
    "parse",
    "generate",
    "Bitmap",
    "decode_bitmap",
    "encode_bitmap",
    "FieldDescriptor",
    "FieldDescriptorRegistry",
    "FieldType",
    "DEFAULT_REGISTRY",
]
