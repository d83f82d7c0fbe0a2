"""Codec configuration.

This module provides the configuration dataclass shared by the parser and
generator, and the policy that decides what happens to bitmap flags with no
matching field descriptor.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .codec.descriptors import DEFAULT_REGISTRY, FieldDescriptorRegistry


class UnknownFieldPolicy(str, enum.Enum):
    """What the parser does with a flagged field that has no descriptor.

    SKIP ignores the flag without consuming any bytes. Because the field's
    bytes are still on the wire, every later field is read from the wrong
    offset; the parser logs a warning but cannot detect the damage.

    ERROR aborts the parse with UnknownFieldError.
    """

    SKIP = "skip"
    ERROR = "error"


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for parse() and generate().

    Attributes:
        registry: Field descriptors used to lay out fields (default DEFAULT_REGISTRY)
        unknown_fields: Policy for flagged fields missing from the registry
            (default UnknownFieldPolicy.SKIP). The string values "skip" and
            "error" are accepted.

    Examples:
        ```python
        from isocodec import CodecConfig, FieldDescriptor, UnknownFieldPolicy, parse
        from isocodec.codec.descriptors import DEFAULT_REGISTRY

        # Reject messages that flag fields we cannot lay out
        strict = CodecConfig(unknown_fields=UnknownFieldPolicy.ERROR)
        message = parse(wire, config=strict)

        # Support an extra fixed field without touching the parser
        config = CodecConfig(registry=DEFAULT_REGISTRY.extend({37: FieldDescriptor(12)}))
        ```
    """

    registry: FieldDescriptorRegistry = DEFAULT_REGISTRY
    unknown_fields: UnknownFieldPolicy = UnknownFieldPolicy.SKIP

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not isinstance(self.registry, FieldDescriptorRegistry):
            raise ValueError(
                f"registry must be a FieldDescriptorRegistry, got {type(self.registry).__name__}"
            )

        try:
            policy = UnknownFieldPolicy(self.unknown_fields)
        except ValueError as e:
            raise ValueError(
                f"unknown_fields must be 'skip' or 'error', got {self.unknown_fields!r}"
            ) from e
        object.__setattr__(self, "unknown_fields", policy)


DEFAULT_CONFIG = CodecConfig()
