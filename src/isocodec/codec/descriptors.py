"""Field descriptors and the descriptor registry.

A FieldDescriptor tells the parser and generator how one field is laid out on
the wire. The registry maps field numbers to descriptors and is read-only once
built; supporting another field means adding a row to the table, not changing
parser or generator code.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from ..exceptions import DescriptorError

MAX_FIELD_NUMBER = 128
# Largest value a 2-digit decimal length prefix can express
MAX_VARIABLE_LENGTH = 99


class FieldType(str, enum.Enum):
    """Logical content class of a field."""

    NUMERIC = "n"
    ALPHA = "a"
    BINARY = "b"
    ALPHANUMERIC = "an"


@dataclass(frozen=True)
class FieldDescriptor:
    """Static layout rule for a single field.

    Attributes:
        length: Byte length for fixed fields, maximum length for variable fields
        variable: Whether the field carries a 2-digit length prefix
        type: Logical content class (only ALPHANUMERIC values are trimmed)
        name: Human-readable field name
    """

    length: int
    variable: bool = False
    type: FieldType = FieldType.NUMERIC
    name: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate descriptor parameters."""
        if self.length <= 0:
            raise DescriptorError(f"Field length must be > 0, got {self.length}")
        if self.variable and self.length > MAX_VARIABLE_LENGTH:
            raise DescriptorError(
                f"Variable field length must be <= {MAX_VARIABLE_LENGTH}, got {self.length}"
            )
        if not isinstance(self.type, FieldType):
            try:
                object.__setattr__(self, "type", FieldType(self.type))
            except ValueError as e:
                raise DescriptorError(f"Unknown field type: {self.type!r}") from e

    @property
    def trims_whitespace(self) -> bool:
        return self.type is FieldType.ALPHANUMERIC


class FieldDescriptorRegistry(Mapping[int, FieldDescriptor]):
    """Immutable mapping from field number to FieldDescriptor.

    Absence of a field number is a valid state: ``lookup`` returns None and
    the parser decides what to do (see UnknownFieldPolicy).

    Example:
        >>> registry = FieldDescriptorRegistry({3: FieldDescriptor(6)})
        >>> registry.lookup(3)
        FieldDescriptor(length=6, variable=False, type=<FieldType.NUMERIC: 'n'>, name=None)
        >>> registry.lookup(4) is None
        True
    """

    def __init__(self, descriptors: Mapping[int, FieldDescriptor]) -> None:
        table: dict[int, FieldDescriptor] = {}
        for field_number, descriptor in descriptors.items():
            if not isinstance(field_number, int) or not 1 <= field_number <= MAX_FIELD_NUMBER:
                raise DescriptorError(
                    f"Field number must be an integer 1-{MAX_FIELD_NUMBER}, got {field_number!r}"
                )
            if not isinstance(descriptor, FieldDescriptor):
                raise DescriptorError(
                    f"Field {field_number}: expected FieldDescriptor, "
                    f"got {type(descriptor).__name__}"
                )
            table[field_number] = descriptor
        self._table = MappingProxyType(table)

    def __getitem__(self, field_number: int) -> FieldDescriptor:
        return self._table[field_number]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._table))

    def __len__(self) -> int:
        return len(self._table)

    def __hash__(self) -> int:
        return hash(frozenset(self._table.items()))

    def __repr__(self) -> str:
        return f"FieldDescriptorRegistry(fields={list(self)})"

    def lookup(self, field_number: int) -> Optional[FieldDescriptor]:
        """Return the descriptor for a field, or None if it is not registered."""
        return self._table.get(field_number)

    def extend(self, descriptors: Mapping[int, FieldDescriptor]) -> FieldDescriptorRegistry:
        """Return a new registry with extra (or replacement) descriptors.

        The current registry is left untouched.
        """
        merged = dict(self._table)
        merged.update(descriptors)
        return FieldDescriptorRegistry(merged)


_DEFAULT_DESCRIPTORS = {
    2: FieldDescriptor(19, variable=True, type=FieldType.NUMERIC, name="Primary account number"),
    3: FieldDescriptor(6, type=FieldType.NUMERIC, name="Processing code"),
    4: FieldDescriptor(12, type=FieldType.NUMERIC, name="Amount, transaction"),
    7: FieldDescriptor(10, type=FieldType.NUMERIC, name="Transmission date and time"),
    11: FieldDescriptor(6, type=FieldType.NUMERIC, name="Systems trace audit number"),
    12: FieldDescriptor(6, type=FieldType.NUMERIC, name="Local transaction time"),
    13: FieldDescriptor(4, type=FieldType.NUMERIC, name="Local transaction date"),
    39: FieldDescriptor(2, type=FieldType.ALPHANUMERIC, name="Response code"),
    41: FieldDescriptor(8, type=FieldType.ALPHANUMERIC, name="Card acceptor terminal id"),
    43: FieldDescriptor(40, type=FieldType.ALPHANUMERIC, name="Card acceptor name/location"),
    63: FieldDescriptor(11, variable=True, type=FieldType.ALPHANUMERIC, name="Private use"),
}

DEFAULT_REGISTRY = FieldDescriptorRegistry(_DEFAULT_DESCRIPTORS)
