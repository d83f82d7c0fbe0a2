"""Utility functions for isocodec.

This module provides padding helpers and field/message validation checks.
"""

from __future__ import annotations

from .text import pad_right
from .validation import (
    is_field_present,
    unparsed_fields,
    validate_field_length,
    validate_numeric_field,
)

__all__ = [
    # Text helpers
    "pad_right",
    # Validation
    "validate_numeric_field",
    "validate_field_length",
    "is_field_present",
    "unparsed_fields",
]
