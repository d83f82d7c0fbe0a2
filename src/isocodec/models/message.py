"""ISO 8583 message model.

This module provides the Message class produced by parse() and consumed by
generate().
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..codec.bitmap import BITMAP_SIZE, Bitmap


class Message(BaseModel):
    """A parsed or constructed ISO 8583 message.

    Field values are plain strings. The bitmap says which fields are present on
    the wire; ``fields`` holds their payloads. The two are kept in step by
    ``set_field``/``remove_field`` and by ``Message.build``, but nothing stops a
    caller from editing them separately (see ``utils.unparsed_fields``).

    Example:
        >>> msg = Message.build("0800", {3: "123456"})
        >>> msg.bitmap.is_set(3)
        True
        >>> msg.get_field(3)
        '123456'

    Attributes:
        mti: 4-character message type indicator, carried verbatim
        bitmap: 128-slot presence vector (only fields 1-64 reach the wire)
        fields: Field number to payload
    """

    model_config = ConfigDict(
        # Bitmap is a plain class, not a pydantic type
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra="forbid",
    )

    mti: str
    bitmap: Bitmap = Field(default_factory=Bitmap)
    fields: dict[int, str] = Field(default_factory=dict)

    @field_validator("bitmap", mode="before")
    @classmethod
    def _coerce_bitmap(cls, value: Any) -> Any:
        # Each message owns its bitmap
        if isinstance(value, Bitmap):
            return value.copy()
        if isinstance(value, (list, tuple)):
            return Bitmap(value)
        return value

    @field_validator("fields")
    @classmethod
    def _check_field_numbers(cls, value: dict[int, str]) -> dict[int, str]:
        for field_number in value:
            if not 1 <= field_number <= BITMAP_SIZE:
                raise ValueError(f"Field number must be 1-{BITMAP_SIZE}, got {field_number}")
        return value

    @classmethod
    def build(cls, mti: str, fields: Optional[Mapping[int, str]] = None) -> Message:
        """Create a message whose bitmap flags exactly the given fields."""
        message = cls(mti=mti, bitmap=Bitmap(), fields=dict(fields or {}))
        for field_number in message.fields:
            message.bitmap.set(field_number)
        return message

    def get_field(self, field_number: int, default: Optional[str] = None) -> Optional[str]:
        return self.fields.get(field_number, default)

    def set_field(self, field_number: int, value: str) -> None:
        """Store a field value and flag it present."""
        self.bitmap.set(field_number)
        self.fields[field_number] = value

    def remove_field(self, field_number: int) -> None:
        """Drop a field value and flag it absent."""
        self.bitmap.clear(field_number)
        self.fields.pop(field_number, None)

    def present_fields(self) -> list[int]:
        """Return field numbers flagged in the bitmap, ascending."""
        return self.bitmap.present_fields()
