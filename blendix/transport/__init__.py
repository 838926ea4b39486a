"""Transport layer: links that carry coordinate frames to a board."""

from .base import Link
from .errors import MultiplePortsError, PortNotFoundError
from .port_finder import (
    PortInfo,
    find_ports,
    find_single_port,
    is_arduino_like,
    is_matching_port,
)
from .serial import SerialLink

__all__ = [
    "Link",
    "SerialLink",
    "PortInfo",
    "find_ports",
    "find_single_port",
    "is_arduino_like",
    "is_matching_port",
    "PortNotFoundError",
    "MultiplePortsError",
]
