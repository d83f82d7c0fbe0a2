"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys

import pytest

from isocodec import Message, parse
from isocodec.cli.main import build_message, build_response, main, response_mti


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = subprocess.run(
        [sys.executable, "-m", "isocodec.cli.main", "--help"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "isocodec: ISO 8583 Message Codec" in result.stdout
    assert "parse" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = subprocess.run(
        [sys.executable, "-m", "isocodec.cli.main", "--version"],
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0
    assert "isocodec 0.1.0" in result.stdout


def test_cli_no_args(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI with no arguments (should show help)."""
    assert main([]) == 0
    assert "isocodec: ISO 8583 Message Codec" in capsys.readouterr().out


def test_cli_parse(sample_wire: str, capsys: pytest.CaptureFixture[str]) -> None:
    """Test printing a parsed message."""
    assert main(["parse", sample_wire]) == 0

    out = capsys.readouterr().out
    assert "MTI: 0800" in out
    assert "Bitmap: [3, 11, 12, 13, 43, 63]" in out
    assert "Field 3 (Processing code): 810000" in out
    assert "Field 11 (Systems trace audit number): 000001" in out


def test_cli_parse_reports_skipped_fields(capsys: pytest.CaptureFixture[str]) -> None:
    """Test skipped unknown fields are listed."""
    assert main(["parse", "0800A000000000000000123456"]) == 0

    assert "Flagged but not parsed: [1]" in capsys.readouterr().out


def test_cli_parse_strict(capsys: pytest.CaptureFixture[str]) -> None:
    """Test --strict turns unknown fields into an error."""
    assert main(["--strict", "parse", "0800A000000000000000123456"]) == 1

    assert "Error: Field 1" in capsys.readouterr().err


def test_cli_parse_invalid(capsys: pytest.CaptureFixture[str]) -> None:
    """Test codec errors are reported on stderr."""
    assert main(["parse", "0800"]) == 1

    assert "Error: Message too short" in capsys.readouterr().err


def test_cli_respond(sample_wire: str, capsys: pytest.CaptureFixture[str]) -> None:
    """Test building an approval response."""
    assert main(["respond", sample_wire]) == 0

    out = capsys.readouterr().out.strip()
    assert out == "0810" + "2038000002000000" + "810000" + "000001" + "084909" + "0522" + "00"


def test_cli_respond_code(capsys: pytest.CaptureFixture[str]) -> None:
    """Test a custom response code."""
    assert main(["respond", "08002000000000000000123456", "--code", "05"]) == 0

    out = capsys.readouterr().out.strip()
    assert parse(out).fields == {3: "123456", 39: "05"}


def test_cli_build(capsys: pytest.CaptureFixture[str]) -> None:
    """Test building a message with padding."""
    assert main(["build", "0800", "3=123456", "11=1", "--pad"]) == 0

    assert capsys.readouterr().out.strip() == "0800" + "2020000000000000" + "123456" + "000001"


def test_cli_build_invalid_assignment(capsys: pytest.CaptureFixture[str]) -> None:
    """Test malformed FIELD=VALUE arguments."""
    assert main(["build", "0800", "three=123456"]) == 1

    assert "Expected FIELD=VALUE" in capsys.readouterr().err


class TestHelpers:
    """Test CLI helper functions."""

    def test_response_mti(self) -> None:
        """Test request MTIs map to response MTIs."""
        assert response_mti("0800") == "0810"
        assert response_mti("0200") == "0210"
        assert response_mti("0420") == "0430"

    @pytest.mark.parametrize("mti", ["0810", "08", "08X0"])
    def test_response_mti_rejects_non_requests(self, mti: str) -> None:
        """Test responses and malformed MTIs are rejected."""
        with pytest.raises(ValueError, match="not a request"):
            response_mti(mti)

    def test_build_response_echoes_fields(self) -> None:
        """Test echoed fields and response code."""
        request = Message.build("0200", {2: "4111111111111111", 3: "000000", 41: "TERM0001"})
        response = build_response(request)

        assert response.mti == "0210"
        assert response.fields == {3: "000000", 39: "00", 41: "TERM0001"}
        assert response.present_fields() == [3, 39, 41]

    def test_build_message_pads_fixed_fields(self) -> None:
        """Test numeric fields are zero filled and others space filled."""
        msg = build_message("0800", ["4=1000", "41=T1", "2=4111"], pad=True)

        assert msg.fields == {4: "000000001000", 41: "T1      ", 2: "4111"}

    def test_build_message_without_padding(self) -> None:
        """Test values are kept as given without --pad."""
        msg = build_message("0800", ["4=1000"])

        assert msg.fields == {4: "1000"}
