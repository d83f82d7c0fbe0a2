"""String helpers for building field values."""

from __future__ import annotations


def pad_right(value: str, pad: str, length: int) -> str:
    """Pad a value on the right to exactly ``length`` characters.

    Values already longer than ``length`` are truncated. Useful for fixed
    fields, which generate() writes as stored.

    Args:
        value: Value to pad
        pad: Padding string (usually a single character)
        length: Exact length of the result

    Returns:
        Padded or truncated value

    Raises:
        ValueError: If pad is empty or length is negative

    Example:
        >>> pad_right("ACME STORE", " ", 14)
        'ACME STORE    '
    """
    if not pad:
        raise ValueError("pad must not be empty")
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")

    if len(value) < length:
        repeats = (length - len(value)) // len(pad) + 1
        value = value + pad * repeats
    return value[:length]
