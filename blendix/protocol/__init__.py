"""Protocol layer: wire format encoding, decoding and line framing."""

from .base import Protocol
from .ascii_protocol import ASCIIProtocol
from .formatting import format_component, format_float, format_int
from .parser import CoordinateParser
from .serializer import CoordinateSerializer, read_bounded

__all__ = [
    "Protocol",
    "ASCIIProtocol",
    "CoordinateParser",
    "CoordinateSerializer",
    "format_component",
    "format_float",
    "format_int",
    "read_bounded",
]
