"""Exception hierarchy for isocodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from IsoCodecError for easy catching of any isocodec-specific error.
"""

from __future__ import annotations


class IsoCodecError(Exception):
    """Base exception for all isocodec errors."""

    pass


class LengthError(IsoCodecError):
    """Raised when a wire string is too short to hold the MTI and primary bitmap."""

    pass


class FormatError(IsoCodecError):
    """Raised when part of a wire string is malformed.

    Examples:
        - Bitmap is not exactly 16 characters
        - Bitmap contains a non-hexadecimal character
        - Length prefix of a variable field is truncated or not numeric
    """

    pass


class RangeError(IsoCodecError):
    """Raised when a field claims more bytes than remain in the message.

    Examples:
        - Fixed-length field runs past the end of the data
        - Length prefix of a variable field exceeds the remaining data
    """

    pass


class UnknownFieldError(IsoCodecError):
    """Raised when the bitmap flags a field that has no descriptor.

    Only raised when the parser runs with UnknownFieldPolicy.ERROR.
    """

    def __init__(self, field_number: int) -> None:
        super().__init__(f"Field {field_number} is present in bitmap but has no descriptor")
        self.field_number = field_number


class DescriptorError(IsoCodecError):
    """Raised when a field descriptor or registry definition is invalid.

    Examples:
        - Non-positive field length
        - Variable field longer than a 2-digit length prefix can express
        - Field number outside 1-128
    """

    pass
