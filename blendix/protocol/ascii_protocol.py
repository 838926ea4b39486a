"""ASCII line protocol.

One wire string per line: ``"v1,v2,...,v(3N);text\\n"``.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from .base import Protocol

if TYPE_CHECKING:
    from ..codec import BlendixSerial

LINE_TERMINATOR = b"\n"


class ASCIIProtocol(Protocol):
    """Newline-terminated ASCII frames.
    
    Matches sketches that send with ``Serial.println`` and read with
    ``Serial.readStringUntil('\\n')``.
    """
    
    def __init__(self, terminator: bytes = LINE_TERMINATOR):
        self._terminator = terminator
    
    def serialize_frame(self, codec: BlendixSerial) -> bytes:
        """Format the codec output and append the line terminator."""
        return codec.format_output().encode("utf-8") + self._terminator
    
    def parse_frame(self, line: bytes, codec: BlendixSerial) -> bool:
        """Strip line endings and whitespace, then decode into the codec."""
        text = line.decode("utf-8", errors="ignore").strip()
        return codec.parse_received_data(text)
    
    @property
    def terminator(self) -> bytes:
        return self._terminator
    
    @property
    def name(self) -> str:
        return "ascii"
