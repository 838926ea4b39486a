"""Immutable data models for coordinate triples.

Triples are frozen dataclasses so a snapshot handed to a caller can never
be changed behind the owner's back. The two variants are kept as separate
types; `Triple` is their union.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

# Capacity limits
MAX_SETS = 5
TEXT_BUFFER_SIZE = 50

# Counts a fresh codec starts with
DEFAULT_TX_SETS = 1
DEFAULT_RX_SETS = 0


class CoordinateType(Enum):
    """Numeric representation of transmit triples."""
    INT = "int"
    FLOAT = "float"


@dataclass(frozen=True)
class IntTriple:
    """One (x, y, z) set stored as signed integers."""
    x: int = 0
    y: int = 0
    z: int = 0

    def values(self) -> Tuple[int, int, int]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class FloatTriple:
    """One (x, y, z) set stored as decimals.
    
    Transmit triples of this type are rendered with two fraction digits;
    every received triple is of this type.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def values(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


Triple = Union[IntTriple, FloatTriple]


def zero_triple(coord_type: CoordinateType) -> Triple:
    """Return the zero triple for a coordinate type."""
    if coord_type == CoordinateType.INT:
        return IntTriple()
    return FloatTriple()


def triple_type(triple: Triple) -> CoordinateType:
    """Return the coordinate type a triple belongs to."""
    if isinstance(triple, IntTriple):
        return CoordinateType.INT
    if isinstance(triple, FloatTriple):
        return CoordinateType.FLOAT
    raise TypeError(f"Unknown triple type: {type(triple)}")
