#!/usr/bin/env python3
"""Basic usage example for isocodec.

This example demonstrates:
1. Parsing a wire string into a Message
2. Building an approval response
3. Generating the response wire string
4. Supporting an extra field by extending the registry
"""

from __future__ import annotations

from isocodec import (
    DEFAULT_REGISTRY,
    CodecConfig,
    FieldDescriptor,
    FieldType,
    Message,
    generate,
    parse,
)
from isocodec.utils import unparsed_fields

REQUEST = (
    "08002038000000200002810000000001084909052253415630305A303537363331202020205341564E"
    "47583130303131303032303030302020202020200011010008B9F3F723CA3CD2F8"
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("isocodec Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Parsing a network management request...")
    request = parse(REQUEST)
    print(f"   MTI: {request.mti}")
    for field_number in request.present_fields():
        print(f"   Field {field_number}: {request.get_field(field_number)}")
    print(f"   Unparsed flags: {unparsed_fields(request) or 'none'}")
    print()

    print("2. Building an approval response...")
    response = Message(mti="0810")
    for field_number in (3, 11, 12, 13):
        response.set_field(field_number, request.fields[field_number])
    response.set_field(39, "00")
    wire = generate(response)
    print(f"   Wire: {wire}")
    print(f"   Length: {len(wire)} characters")
    print()

    print("3. Adding field 37 (retrieval reference number) by data only...")
    config = CodecConfig(
        registry=DEFAULT_REGISTRY.extend({37: FieldDescriptor(12, type=FieldType.ALPHANUMERIC)})
    )
    response.set_field(37, "000000123456")
    wire = generate(response, config)
    print(f"   Wire: {wire}")
    print(f"   Round trip OK: {parse(wire, config) == response}")


if __name__ == "__main__":
    main()
