"""Serializer for the coordinate wire format.

Converts transmit triples and a text label into
``"v1,v2,v3,...,v(3N);text"``. Pure functions with no side effects.
"""
from __future__ import annotations

from typing import Sequence

from ..models import Triple, triple_type
from .formatting import format_component

VALUE_SEPARATOR = ","
TEXT_SEPARATOR = ";"
TERMINATOR = 0


class CoordinateSerializer:
    """Serializer for outgoing coordinate frames."""
    
    @staticmethod
    def serialize(triples: Sequence[Triple], text: str = "") -> str:
        """Build the wire string for a sequence of triples.
        
        Each triple is rendered according to its own type, so all triples
        should share the active coordinate type.
        
        Args:
            triples: Triples to send, in order
            text: Label appended after ';' verbatim (may be empty)
            
        Returns:
            Wire string
            
        Examples:
            >>> from blendix.models import IntTriple
            >>> CoordinateSerializer.serialize([IntTriple(1, 2, 3)], "Hi")
            '1,2,3;Hi'
            >>> CoordinateSerializer.serialize([], "Hi")
            ';Hi'
        """
        tokens = []
        for triple in triples:
            coord_type = triple_type(triple)
            tokens.extend(format_component(v, coord_type) for v in triple.values())
        
        return VALUE_SEPARATOR.join(tokens) + TEXT_SEPARATOR + (text or "")
    
    @staticmethod
    def serialize_into(
        buffer: bytearray,
        triples: Sequence[Triple],
        text: str = "",
    ) -> int:
        """Write the wire string into a fixed-capacity buffer.
        
        The buffer is never resized. Output that does not fit is truncated
        silently, and a zero byte always follows the payload, so the last
        byte of the buffer is reserved for it. A zero-length buffer is
        left untouched.
        
        Args:
            buffer: Caller-owned output buffer
            triples: Triples to send, in order
            text: Label appended after ';'
            
        Returns:
            Number of payload bytes written (excluding the terminator)
        """
        capacity = len(buffer)
        if capacity == 0:
            return 0
        
        payload = CoordinateSerializer.serialize(triples, text).encode("utf-8")
        written = min(len(payload), capacity - 1)
        
        buffer[:written] = payload[:written]
        buffer[written] = TERMINATOR
        buffer[capacity - 1] = TERMINATOR
        return written


def read_bounded(buffer: bytes) -> str:
    """Read a terminator-bounded string back out of a buffer.
    
    Stops at the first zero byte, or at the end of the buffer if none.
    """
    data = bytes(buffer)
    end = data.find(bytes([TERMINATOR]))
    if end != -1:
        data = data[:end]
    return data.decode("utf-8", errors="ignore")
