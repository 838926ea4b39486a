"""Blendix - coordinate triples and a text label over a serial link."""

from .codec import BlendixSerial
from .errors import (
    BlendixError,
    IncompleteTriple,
    InvalidCoordinateType,
    InvalidCoordinateValue,
    InvalidCount,
    InvalidSetIndex,
    InvalidToken,
    MalformedTerminator,
    VariantMismatch,
)
from .models import (
    MAX_SETS,
    TEXT_BUFFER_SIZE,
    CoordinateType,
    FloatTriple,
    IntTriple,
    Triple,
)
from .transport import Link, SerialLink

__all__ = [
    "BlendixSerial",
    "CoordinateType",
    "IntTriple",
    "FloatTriple",
    "Triple",
    "MAX_SETS",
    "TEXT_BUFFER_SIZE",
    "BlendixError",
    "InvalidSetIndex",
    "VariantMismatch",
    "InvalidCount",
    "InvalidCoordinateType",
    "InvalidCoordinateValue",
    "MalformedTerminator",
    "IncompleteTriple",
    "InvalidToken",
    "Link",
    "SerialLink",
]
