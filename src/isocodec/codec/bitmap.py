"""Presence bitmap type and hexadecimal bitmap codec.

A Bitmap holds exactly 128 presence flags, one per ISO 8583 field number.
Flag index ``i - 1`` corresponds to field ``i``. Only the primary bitmap
(flags 1-64) is ever read from or written to the wire; secondary bitmaps are
not supported, so flags 65-128 are carried in memory but never serialized.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from ..exceptions import FormatError

BITMAP_SIZE = 128
PRIMARY_BITS = 64
BITMAP_HEX_LENGTH = PRIMARY_BITS // 4

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class Bitmap:
    """Fixed-size vector of 128 field presence flags.

    The vector cannot grow or shrink. Indexing is 0-based (``bitmap[0]`` is
    field 1); the ``is_set``/``set``/``clear`` helpers take 1-based field numbers.

    Example:
        >>> bitmap = Bitmap.from_fields([2, 3])
        >>> bitmap.is_set(3)
        True
        >>> bitmap[1]
        True
        >>> bitmap.present_fields()
        [2, 3]
    """

    __slots__ = ("_flags",)

    def __init__(self, flags: Iterable[bool] = ()) -> None:
        """Initialize the bitmap, optionally from leading flag values.

        Args:
            flags: Up to 128 initial flags; missing slots are False

        Raises:
            ValueError: If more than 128 flags are given
        """
        values = [bool(flag) for flag in flags]
        if len(values) > BITMAP_SIZE:
            raise ValueError(f"Bitmap holds at most {BITMAP_SIZE} flags, got {len(values)}")
        self._flags = values + [False] * (BITMAP_SIZE - len(values))

    @classmethod
    def from_fields(cls, field_numbers: Iterable[int]) -> Bitmap:
        """Create a bitmap with the given field numbers set."""
        bitmap = cls()
        for field_number in field_numbers:
            bitmap.set(field_number)
        return bitmap

    def __len__(self) -> int:
        return BITMAP_SIZE

    def __getitem__(self, index: int) -> bool:
        return self._flags[self._check_index(index)]

    def __setitem__(self, index: int, value: bool) -> None:
        self._flags[self._check_index(index)] = bool(value)

    def __iter__(self) -> Iterator[bool]:
        return iter(self._flags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Bitmap):
            return NotImplemented
        return self._flags == other._flags

    def __repr__(self) -> str:
        return f"Bitmap({self.present_fields()!r})"

    @staticmethod
    def _check_index(index: int) -> int:
        if not isinstance(index, int):
            raise TypeError(f"Bitmap indices must be integers, got {type(index).__name__}")
        if not 0 <= index < BITMAP_SIZE:
            raise IndexError(f"Bitmap index out of range: {index}")
        return index

    @staticmethod
    def _check_field(field_number: int) -> int:
        if not 1 <= field_number <= BITMAP_SIZE:
            raise IndexError(f"Field number must be 1-{BITMAP_SIZE}, got {field_number}")
        return field_number - 1

    def is_set(self, field_number: int) -> bool:
        """Return True if the field is flagged present."""
        return self._flags[self._check_field(field_number)]

    def set(self, field_number: int) -> None:
        """Flag a field as present."""
        self._flags[self._check_field(field_number)] = True

    def clear(self, field_number: int) -> None:
        """Flag a field as absent."""
        self._flags[self._check_field(field_number)] = False

    def primary(self) -> tuple[bool, ...]:
        """Return the 64 flags of the primary bitmap."""
        return tuple(self._flags[:PRIMARY_BITS])

    def present_fields(self) -> list[int]:
        """Return flagged field numbers in ascending order."""
        return [index + 1 for index, flag in enumerate(self._flags) if flag]

    def copy(self) -> Bitmap:
        return Bitmap(self._flags)


def decode_bitmap(bitmap_hex: str) -> Bitmap:
    """Decode a 16-character hex string into a Bitmap.

    Each hex character expands to 4 flags, most significant bit first, so
    character 0 covers fields 1-4, character 1 covers fields 5-8, and so on.

    Args:
        bitmap_hex: 16 hexadecimal characters (either case)

    Returns:
        Bitmap with flags 1-64 populated

    Raises:
        FormatError: If the length is not 16 or a character is not hex
    """
    if len(bitmap_hex) != BITMAP_HEX_LENGTH:
        raise FormatError(
            f"Invalid bitmap length: got {len(bitmap_hex)}, want {BITMAP_HEX_LENGTH}"
        )

    bitmap = Bitmap()
    for char_index, char in enumerate(bitmap_hex):
        if char not in _HEX_DIGITS:
            raise FormatError(f"Invalid hex digit {char!r} at bitmap position {char_index}")
        nibble = int(char, 16)
        for bit in range(4):
            bitmap[char_index * 4 + bit] = bool(nibble & (1 << (3 - bit)))
    return bitmap


def encode_bitmap(flags: Sequence[bool]) -> str:
    """Encode the first 64 presence flags as 16 uppercase hex characters.

    Flags past index 63 are never read. Setting flag 1 does not make a
    secondary bitmap follow.

    Args:
        flags: Bitmap or any sequence of at least 64 booleans

    Returns:
        16-character uppercase hex string

    Raises:
        ValueError: If fewer than 64 flags are given
    """
    if len(flags) < PRIMARY_BITS:
        raise ValueError(f"Need at least {PRIMARY_BITS} flags to encode, got {len(flags)}")

    digits = []
    for start in range(0, PRIMARY_BITS, 4):
        nibble = 0
        for bit in range(4):
            nibble = (nibble << 1) | (1 if flags[start + bit] else 0)
        digits.append(f"{nibble:X}")
    return "".join(digits)
