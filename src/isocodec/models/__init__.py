"""Message model for isocodec."""

from __future__ import annotations

from .message import Message

__all__ = ["Message"]
