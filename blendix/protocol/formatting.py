"""Numeric token formatting shared by both coordinate types.

Format specs are locale-independent, so '.' is always the decimal point.
"""
from __future__ import annotations

from typing import Union

from ..models import CoordinateType

FLOAT_PRECISION = 2


def format_int(value: int) -> str:
    """Render a signed integer as its minimal decimal token."""
    return f"{int(value):d}"


def format_float(value: float) -> str:
    """Render a decimal with exactly two fraction digits.
    
    Examples:
        >>> format_float(3.14159)
        '3.14'
        >>> format_float(-0.001)
        '-0.00'
    """
    return f"{float(value):.{FLOAT_PRECISION}f}"


def format_component(value: Union[int, float], coord_type: CoordinateType) -> str:
    """Render one coordinate component for the given coordinate type."""
    if coord_type == CoordinateType.INT:
        return format_int(value)
    return format_float(value)
