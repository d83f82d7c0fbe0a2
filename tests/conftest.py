"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

SAMPLE_WIRE = (
    "0800"
    "2038000000200002"
    "810000"
    "000001"
    "084909"
    "0522"
    "53415630305A303537363331202020205341564E"
    "47583130303131303032303030302020202020200011010008B9F3F723CA3CD2F8"
)


@pytest.fixture
def sample_wire() -> str:
    """Network management request with fields 3, 11, 12, 13, 43 and 63."""
    return SAMPLE_WIRE


@pytest.fixture
def sample_fields() -> dict[int, str]:
    """Field values carried by sample_wire."""
    return {
        3: "810000",
        11: "000001",
        12: "084909",
        13: "0522",
        43: "53415630305A303537363331202020205341564E",
        63: "47583130303131303032303030302020202020200011010008B9F3F723CA3CD2F8",
    }
