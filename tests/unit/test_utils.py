"""Unit tests for utility helpers."""

from __future__ import annotations

import pytest

from isocodec import Bitmap, Message, parse
from isocodec.utils import (
    is_field_present,
    pad_right,
    unparsed_fields,
    validate_field_length,
    validate_numeric_field,
)


class TestPadRight:
    """Test right padding."""

    def test_pads(self) -> None:
        """Test short values are padded."""
        assert pad_right("ACME", " ", 8) == "ACME    "

    def test_truncates(self) -> None:
        """Test long values are cut to length."""
        assert pad_right("ACME STORES", " ", 4) == "ACME"

    def test_multi_character_pad(self) -> None:
        """Test multi-character pads still give an exact length."""
        assert pad_right("A", "xy", 6) == "Axyxyx"

    def test_exact_length(self) -> None:
        """Test values of the right length are unchanged."""
        assert pad_right("ABCD", " ", 4) == "ABCD"

    def test_invalid_arguments(self) -> None:
        """Test empty pads and negative lengths are rejected."""
        with pytest.raises(ValueError, match="pad"):
            pad_right("A", "", 4)
        with pytest.raises(ValueError, match="length"):
            pad_right("A", " ", -1)


class TestValidation:
    """Test field content checks."""

    @pytest.mark.parametrize(
        "value,expected", [("123456", True), ("", False), ("12a4", False), (" 12", False)]
    )
    def test_numeric(self, value: str, expected: bool) -> None:
        """Test numeric validation."""
        assert validate_numeric_field(value) is expected

    def test_field_length(self) -> None:
        """Test maximum length validation."""
        assert validate_field_length("4111111111111111", 19)
        assert validate_field_length("", 0)
        assert not validate_field_length("41111111111111111111", 19)

    def test_is_field_present(self) -> None:
        """Test presence checks tolerate out-of-range numbers."""
        bitmap = Bitmap.from_fields([3, 128])

        assert is_field_present(bitmap, 3)
        assert is_field_present(bitmap, 128)
        assert not is_field_present(bitmap, 4)
        assert not is_field_present(bitmap, 0)
        assert not is_field_present(bitmap, 129)


class TestUnparsedFields:
    """Test bitmap/fields consistency checks."""

    def test_consistent_message(self) -> None:
        """Test a built message has no unparsed fields."""
        assert unparsed_fields(Message.build("0800", {3: "123456"})) == []

    def test_skipped_unknown_field(self) -> None:
        """Test fields skipped by the parser are reported."""
        msg = parse("0800" + "A000000000000000" + "123456")

        assert unparsed_fields(msg) == [1]

    def test_fields_after_63(self) -> None:
        """Test flags after field 63 are reported."""
        msg = parse("0800" + "0000000000000003" + "REST")

        assert unparsed_fields(msg) == [64]
