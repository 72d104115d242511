"""Relayed frame value type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FrameMode(str, Enum):
    TEXT = "text"
    BINARY = "binary"


@dataclass(frozen=True, slots=True)
class Frame:
    """One WebSocket message, relayed verbatim.

    Text payloads stay ``str`` and binary payloads stay ``bytes`` end to
    end, so the mode survives the hop without re-encoding.
    """

    payload: str | bytes
    mode: FrameMode

    @classmethod
    def text(cls, data: str) -> Frame:
        return cls(data, FrameMode.TEXT)

    @classmethod
    def binary(cls, data: bytes) -> Frame:
        return cls(bytes(data), FrameMode.BINARY)

    @classmethod
    def from_message(cls, message: str | bytes | bytearray | memoryview) -> Frame:
        """Build a frame from a ``websockets`` style message."""
        if isinstance(message, str):
            return cls.text(message)
        return cls.binary(bytes(message))

    @property
    def is_binary(self) -> bool:
        return self.mode is FrameMode.BINARY

    @property
    def size(self) -> int:
        """Payload length in bytes (UTF-8 for text frames)."""
        if isinstance(self.payload, str):
            return len(self.payload.encode("utf-8"))
        return len(self.payload)


__all__ = ["Frame", "FrameMode"]
