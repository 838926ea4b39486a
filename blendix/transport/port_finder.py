from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from serial.tools import list_ports

from .errors import MultiplePortsError, PortNotFoundError

logger = logging.getLogger(__name__)

# USB vendor IDs of boards and USB-serial bridges commonly found on Arduinos
ARDUINO_VIDS = (
    0x2341,  # Arduino
    0x2A03,  # Arduino.org
    0x1A86,  # QinHeng CH340
    0x0403,  # FTDI
    0x10C4,  # Silicon Labs CP210x
)


@dataclass(frozen=True)
class PortInfo:
    """
    One serial port as reported by pyserial.

    Attributes:
        port: Device name to open (e.g. 'COM3', '/dev/ttyACM0').
        vid: USB Vendor ID, or None for non-USB ports.
        pid: USB Product ID, or None for non-USB ports.
        description: Human readable description from the OS.
        manufacturer: USB manufacturer string, if available.
        product: USB product string, if available.
        serial_number: USB serial string, if available.
        hwid: Raw hardware ID string.
    """
    port: str
    vid: Optional[int]
    pid: Optional[int]
    description: Optional[str]
    manufacturer: Optional[str]
    product: Optional[str]
    serial_number: Optional[str]
    hwid: str


def _to_port_info(port) -> PortInfo:
    """Convert pyserial's ListPortInfo to PortInfo."""
    return PortInfo(
        port=port.device,
        vid=port.vid,
        pid=port.pid,
        description=port.description,
        manufacturer=port.manufacturer,
        product=port.product,
        serial_number=port.serial_number,
        hwid=port.hwid,
    )


def is_arduino_like(info: PortInfo) -> bool:
    """True for USB ports whose vendor is a known board or bridge maker."""
    return info.vid in ARDUINO_VIDS


def is_matching_port(
    info: PortInfo,
    *,
    vid: Optional[int] = None,
    pid: Optional[int] = None,
    description_substring: Optional[str] = None,
) -> bool:
    """
    Decide whether a port matches all given criteria.

    A criterion left as None is ignored. The description substring is
    matched case-insensitively against both the OS description and the
    USB product string.
    """
    if vid is not None and info.vid != vid:
        return False

    if pid is not None and info.pid != pid:
        return False

    if description_substring is not None:
        needle = description_substring.lower()
        haystacks = [s.lower() for s in (info.description, info.product) if s]
        if not any(needle in s for s in haystacks):
            return False

    return True


def find_ports(
    *,
    matcher: Optional[Callable[[PortInfo], bool]] = None,
    vid: Optional[int] = None,
    pid: Optional[int] = None,
    description_substring: Optional[str] = None,
) -> List[PortInfo]:
    """
    List serial ports matching either a custom `matcher(info) -> bool`
    or the built-in criteria.
    """
    results: List[PortInfo] = []

    for port in list_ports.comports():
        info = _to_port_info(port)
        if matcher is not None:
            matched = matcher(info)
        else:
            matched = is_matching_port(
                info,
                vid=vid,
                pid=pid,
                description_substring=description_substring,
            )
        if matched:
            results.append(info)

    return results


def find_single_port(
    *,
    matcher: Optional[Callable[[PortInfo], bool]] = None,
    vid: Optional[int] = None,
    pid: Optional[int] = None,
    description_substring: Optional[str] = None,
) -> PortInfo:
    """
    Find exactly one serial port.

    With no criteria at all, any Arduino-like port matches.

    Raises:
        PortNotFoundError: nothing matched
        MultiplePortsError: more than one port matched
    """
    if matcher is None and vid is None and pid is None and description_substring is None:
        matcher = is_arduino_like

    matches = find_ports(
        matcher=matcher,
        vid=vid,
        pid=pid,
        description_substring=description_substring,
    )

    if not matches:
        raise PortNotFoundError("No matching serial port found")

    if len(matches) > 1:
        logger.error(
            "Multiple matching serial ports found; refusing to choose automatically. "
            "Ports: %s",
            [m.port for m in matches],
        )
        raise MultiplePortsError(
            f"Multiple matching serial ports found ({len(matches)} ports)",
            ports=matches,
        )

    return matches[0]
