"""Main CLI entry point for isocodec."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .. import __version__
from ..codec import DEFAULT_REGISTRY, FieldType, generate, parse
from ..config import CodecConfig, UnknownFieldPolicy
from ..exceptions import IsoCodecError
from ..models.message import Message
from ..utils import pad_right, unparsed_fields

# Request fields copied into a generated response when present
ECHO_FIELDS = (3, 11, 12, 13, 41)
RESPONSE_CODE_FIELD = 39


def response_mti(mti: str) -> str:
    """Return the response MTI for a request MTI (0800 -> 0810, 0200 -> 0210).

    Raises:
        ValueError: If the message function digit is not an even request digit
    """
    if len(mti) != 4 or mti[2] not in "02468":
        raise ValueError(f"MTI {mti!r} is not a request message type")
    return mti[:2] + str(int(mti[2]) + 1) + mti[3]


def build_response(request: Message, response_code: str = "00") -> Message:
    """Build a response to a parsed request.

    Echoes the request's processing code, STAN, local time/date and terminal
    id, and sets the response code.
    """
    response = Message(mti=response_mti(request.mti))
    for field_number in ECHO_FIELDS:
        value = request.get_field(field_number)
        if value is not None:
            response.set_field(field_number, value)
    response.set_field(RESPONSE_CODE_FIELD, response_code)
    return response


def build_message(mti: str, assignments: Sequence[str], pad: bool = False) -> Message:
    """Build a message from ``FIELD=VALUE`` strings.

    With ``pad`` set, values of fixed registered fields are padded to their
    declared length: numeric fields with leading zeros, others with trailing
    spaces.

    Raises:
        ValueError: If an assignment is malformed
    """
    fields: dict[int, str] = {}
    for assignment in assignments:
        number, sep, value = assignment.partition("=")
        if not sep or not number.isdigit():
            raise ValueError(f"Expected FIELD=VALUE, got {assignment!r}")
        field_number = int(number)

        descriptor = DEFAULT_REGISTRY.lookup(field_number)
        if pad and descriptor is not None and not descriptor.variable:
            if descriptor.type is FieldType.NUMERIC:
                value = value.rjust(descriptor.length, "0")[-descriptor.length :]
            else:
                value = pad_right(value, " ", descriptor.length)
        fields[field_number] = value
    return Message.build(mti, fields)


def print_message(message: Message) -> None:
    """Print MTI, bitmap and fields of a message."""
    print(f"MTI: {message.mti}")
    print(f"Bitmap: {message.present_fields()}")
    for field_number in sorted(message.fields):
        descriptor = DEFAULT_REGISTRY.lookup(field_number)
        name = f" ({descriptor.name})" if descriptor is not None and descriptor.name else ""
        print(f"Field {field_number}{name}: {message.fields[field_number]}")

    skipped = unparsed_fields(message)
    if skipped:
        print(f"Flagged but not parsed: {skipped}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the isocodec CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="isocodec",
        description="isocodec: ISO 8583 Message Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  isocodec parse 08002000000000000000123456     Parse a message
  isocodec respond 08002000000000000000123456   Build an approval response
  isocodec build 0800 3=123456 11=1 --pad       Build a message from fields
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"isocodec {__version__}",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on flagged fields that have no descriptor instead of skipping them",
    )

    subparsers = parser.add_subparsers(dest="command")

    parse_cmd = subparsers.add_parser("parse", help="Parse a wire string and print its fields")
    parse_cmd.add_argument("wire", help="ISO 8583 message string")

    respond_cmd = subparsers.add_parser("respond", help="Print a response to a request")
    respond_cmd.add_argument("wire", help="ISO 8583 request string")
    respond_cmd.add_argument("--code", default="00", help="Response code (default 00)")

    build_cmd = subparsers.add_parser("build", help="Generate a wire string from field values")
    build_cmd.add_argument("mti", help="Message type indicator")
    build_cmd.add_argument("fields", nargs="*", metavar="FIELD=VALUE", help="Field values")
    build_cmd.add_argument(
        "--pad", action="store_true", help="Pad fixed fields to their declared length"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = CodecConfig(
        unknown_fields=UnknownFieldPolicy.ERROR if args.strict else UnknownFieldPolicy.SKIP
    )

    try:
        if args.command == "parse":
            print_message(parse(args.wire, config=config))
            return 0

        if args.command == "respond":
            response = build_response(parse(args.wire, config=config), args.code)
            print(generate(response, config=config))
            return 0

        if args.command == "build":
            print(generate(build_message(args.mti, args.fields, pad=args.pad), config=config))
            return 0
    except (IsoCodecError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
