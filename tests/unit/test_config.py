"""Unit tests for codec configuration."""

from __future__ import annotations

import dataclasses

import pytest

from isocodec import (
    DEFAULT_REGISTRY,
    CodecConfig,
    FieldDescriptor,
    FieldDescriptorRegistry,
    UnknownFieldPolicy,
)


class TestCodecConfig:
    """Test CodecConfig defaults and validation."""

    def test_defaults(self) -> None:
        """Test the default configuration."""
        config = CodecConfig()

        assert config.registry is DEFAULT_REGISTRY
        assert config.unknown_fields is UnknownFieldPolicy.SKIP

    def test_policy_from_string(self) -> None:
        """Test policy names are accepted as strings."""
        assert CodecConfig(unknown_fields="error").unknown_fields is UnknownFieldPolicy.ERROR
        assert CodecConfig(unknown_fields="skip").unknown_fields is UnknownFieldPolicy.SKIP

    def test_invalid_policy(self) -> None:
        """Test unknown policy names are rejected."""
        with pytest.raises(ValueError, match="unknown_fields"):
            CodecConfig(unknown_fields="consume")

    def test_invalid_registry(self) -> None:
        """Test plain dicts are not accepted as registries."""
        with pytest.raises(ValueError, match="FieldDescriptorRegistry"):
            CodecConfig(registry={3: FieldDescriptor(6)})  # type: ignore[arg-type]

    def test_registry_default_is_shared_instance(self) -> None:
        """Test separate configs reuse the default registry."""
        assert CodecConfig().registry is CodecConfig().registry
        assert hash(CodecConfig()) == hash(CodecConfig())

    def test_custom_registry(self) -> None:
        """Test a custom registry is kept as given."""
        registry = FieldDescriptorRegistry({3: FieldDescriptor(6)})

        assert CodecConfig(registry=registry).registry is registry

    def test_frozen(self) -> None:
        """Test configuration cannot be changed after creation."""
        config = CodecConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.unknown_fields = UnknownFieldPolicy.ERROR  # type: ignore[misc]
