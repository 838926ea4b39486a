"""Serial link to a board running the matching sketch.

Synchronous by design of the codec: every call runs to completion on the
caller's thread, and no background reader is started.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import serial

from ..protocol import ASCIIProtocol, Protocol
from .base import Link
from .errors import PortNotFoundError
from .port_finder import find_single_port

if TYPE_CHECKING:
    from ..codec import BlendixSerial

logger = logging.getLogger(__name__)

DEFAULT_BAUDRATE = 115200
READ_TIMEOUT = 1.0  # seconds
MAX_PENDING = 4096  # bytes held while waiting for a terminator


class SerialLink(Link):
    """Line-framed serial link.
    
    Example:
        >>> codec = BlendixSerial()
        >>> codec.set_rx_sets(2)
        True
        >>> with SerialLink(port="/dev/ttyACM0") as link:
        ...     link.send(codec)
        ...     if link.receive(codec):
        ...         print(codec.received_coordinates)
    """
    
    def __init__(
        self,
        port: Optional[str] = None,
        baudrate: int = DEFAULT_BAUDRATE,
        timeout: float = READ_TIMEOUT,
        protocol: Optional[Protocol] = None,
    ):
        """Initialize serial link.
        
        Args:
            port: Serial port path (e.g., '/dev/ttyACM0'), or None to auto-detect
            baudrate: Serial baud rate
            timeout: Read timeout in seconds
            protocol: Framing protocol (default: ASCIIProtocol)
        """
        self._port = port
        self._baudrate = baudrate
        self._timeout = timeout
        self._protocol = protocol or ASCIIProtocol()
        
        self._serial: Optional[serial.Serial] = None
        self._pending = bytearray()
    
    @property
    def port(self) -> Optional[str]:
        return self._port
    
    def connect(self) -> bool:
        """Open the serial port, auto-detecting it if none was given."""
        if self.is_connected():
            logger.warning("Already connected")
            return True
        
        if self._port is None:
            try:
                self._port = find_single_port().port
                logger.info(f"Auto-detected board on {self._port}")
            except PortNotFoundError as e:
                logger.error(f"Board not found: {e}")
                return False
            except RuntimeError as e:
                logger.error(f"Error finding board: {e}")
                return False
        
        try:
            self._serial = serial.Serial(
                port=self._port,
                baudrate=self._baudrate,
                timeout=self._timeout,
            )
            self._serial.reset_input_buffer()
            self._serial.reset_output_buffer()
        except serial.SerialException as e:
            logger.error(f"Failed to open {self._port}: {e}")
            self._serial = None
            return False
        
        self._pending.clear()
        logger.info(f"Connected to {self._port} @ {self._baudrate} baud")
        return True
    
    def disconnect(self) -> None:
        """Close the serial port."""
        if self._serial is None:
            return
        
        try:
            self._serial.close()
        except serial.SerialException as e:
            logger.error(f"Error closing serial port: {e}")
        finally:
            self._serial = None
            self._pending.clear()
        
        logger.info("Disconnected")
    
    def is_connected(self) -> bool:
        return self._serial is not None
    
    def write_frame(self, frame: bytes) -> bool:
        """Write raw frame bytes."""
        if self._serial is None:
            logger.warning("Cannot send, not connected")
            return False
        
        try:
            self._serial.write(frame)
            self._serial.flush()
            return True
        except serial.SerialException as e:
            logger.error(f"Send error: {e}")
            self.disconnect()
            return False
    
    def read_frame(self) -> Optional[bytes]:
        """Read one terminated line.
        
        A partial line left by a read timeout is kept and completed by
        the next call. Lines already complete in the pending bytes are
        returned without touching the port.
        
        Returns:
            Line bytes including the terminator, or None on timeout
        """
        if self._serial is None:
            logger.warning("Cannot read, not connected")
            return None
        
        line = self._take_line()
        if line is not None:
            return line
        
        try:
            chunk = self._serial.read_until(self._protocol.terminator)
        except serial.SerialException as e:
            logger.error(f"Serial read error: {e}")
            self.disconnect()
            return None
        
        self._pending.extend(chunk)
        line = self._take_line()
        if line is None and len(self._pending) > MAX_PENDING:
            logger.warning(f"Dropping {len(self._pending)} bytes without line terminator")
            self._pending.clear()
        return line
    
    def send(self, codec: BlendixSerial) -> bool:
        """Send the codec's current transmit sets and label."""
        return self.write_frame(self._protocol.serialize_frame(codec))
    
    def receive(self, codec: BlendixSerial) -> bool:
        """Read one line and decode it into the codec.
        
        Returns:
            True if a line arrived and was accepted by the codec
        """
        line = self.read_frame()
        if line is None:
            return False
        return self._protocol.parse_frame(line, codec)
    
    def _take_line(self) -> Optional[bytes]:
        """Pop the first complete line from the pending bytes, if any."""
        terminator = self._protocol.terminator
        idx = self._pending.find(terminator)
        if idx == -1:
            return None
        
        end = idx + len(terminator)
        line = bytes(self._pending[:end])
        del self._pending[:end]
        return line
