"""Stateful coordinate codec.

`BlendixSerial` owns the transmit triples, the last received triples, the
set counts, the active coordinate type and the text label. Encoding and
decoding are delegated to the protocol layer; this class enforces the
capacity rules and keeps every mutation all-or-nothing.

Not thread-safe. A single owner must serialize access to an instance.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union

from .errors import (
    BlendixError,
    InvalidCoordinateType,
    InvalidCoordinateValue,
    InvalidCount,
    InvalidSetIndex,
    VariantMismatch,
)
from .models import (
    DEFAULT_RX_SETS,
    DEFAULT_TX_SETS,
    MAX_SETS,
    TEXT_BUFFER_SIZE,
    CoordinateType,
    FloatTriple,
    IntTriple,
    Triple,
    triple_type,
    zero_triple,
)
from .protocol.parser import CoordinateParser
from .protocol.serializer import CoordinateSerializer

logger = logging.getLogger(__name__)


def _is_int(value) -> bool:
    """True for an int that is not a bool."""
    return isinstance(value, int) and not isinstance(value, bool)


class BlendixSerial:
    """Coordinate sets plus a text label, encoded for a serial link.
    
    Failed operations return False and leave all state unchanged; the
    reason is available as `last_error`.
    
    Example:
        >>> codec = BlendixSerial()
        >>> codec.set_tx_sets(3)
        True
        >>> codec.set_coordinates(1, 1, 2, 3)
        True
        >>> codec.set_text("Hi")
        >>> codec.format_output()
        '1,2,3,0,0,0,0,0,0;Hi'
        >>> codec.set_rx_sets(2)
        True
        >>> codec.parse_received_data("10,20,30,40,50,60;")
        True
        >>> codec.get_received_coordinates(1)
        FloatTriple(x=40.0, y=50.0, z=60.0)
    """
    
    def __init__(
        self,
        max_sets: int = MAX_SETS,
        text_buffer_size: int = TEXT_BUFFER_SIZE,
        strict: bool = False,
    ):
        """Initialize codec with integer coordinates.
        
        Args:
            max_sets: Capacity shared by transmit and receive sets
            text_buffer_size: Label capacity including the terminator slot
            strict: Reject non-numeric tokens instead of reading them as 0
        """
        if max_sets < DEFAULT_TX_SETS + DEFAULT_RX_SETS:
            raise ValueError(f"max_sets must be at least {DEFAULT_TX_SETS + DEFAULT_RX_SETS}")
        if text_buffer_size < 1:
            raise ValueError("text_buffer_size must be at least 1")
        
        self._max_sets = max_sets
        self._text_buffer_size = text_buffer_size
        self._strict = strict
        
        self._coord_type = CoordinateType.INT
        self._tx_sets = DEFAULT_TX_SETS
        self._rx_sets = DEFAULT_RX_SETS
        self._transmit: List[Triple] = [zero_triple(self._coord_type)] * max_sets
        self._received: Tuple[FloatTriple, ...] = ()
        self._text = ""
        
        self.last_error: Optional[BlendixError] = None
    
    # Configuration
    
    @property
    def max_sets(self) -> int:
        return self._max_sets
    
    @property
    def coordinate_type(self) -> CoordinateType:
        """Active coordinate type of the transmit sets."""
        return self._coord_type
    
    @property
    def tx_sets(self) -> int:
        return self._tx_sets
    
    @property
    def rx_sets(self) -> int:
        return self._rx_sets
    
    def set_coordinate_type(self, kind: Union[str, CoordinateType]) -> bool:
        """Select integer or decimal transmit coordinates.
        
        Switching type discards all transmit values and starts from zero.
        Selecting the already active type keeps them.
        
        Args:
            kind: "int", "float" or a CoordinateType
            
        Returns:
            True if the type is valid, False otherwise
        """
        try:
            coord_type = CoordinateType(kind)
        except ValueError:
            return self._reject(InvalidCoordinateType(f"Unknown coordinate type: {kind!r}"))
        
        if coord_type != self._coord_type:
            self._coord_type = coord_type
            self._transmit = [zero_triple(coord_type)] * self._max_sets
            logger.debug(f"Coordinate type switched to {coord_type.value}")
        
        return self._accept()
    
    def set_tx_sets(self, sets: int) -> bool:
        """Set how many triples are transmitted."""
        if not _is_int(sets):
            return self._reject(InvalidCount(f"tx_sets must be an integer, got {sets!r}"))
        if sets < 0 or sets + self._rx_sets > self._max_sets:
            return self._reject(InvalidCount(
                f"tx_sets={sets} with rx_sets={self._rx_sets} exceeds capacity {self._max_sets}"
            ))
        self._tx_sets = sets
        return self._accept()
    
    def set_rx_sets(self, sets: int) -> bool:
        """Set how many triples are kept from received data.
        
        Received sets beyond the new count are dropped.
        """
        if not _is_int(sets):
            return self._reject(InvalidCount(f"rx_sets must be an integer, got {sets!r}"))
        if sets < 0 or sets + self._tx_sets > self._max_sets:
            return self._reject(InvalidCount(
                f"rx_sets={sets} with tx_sets={self._tx_sets} exceeds capacity {self._max_sets}"
            ))
        self._rx_sets = sets
        self._received = self._received[:sets]
        return self._accept()
    
    # Transmit side
    
    def set_coordinates(self, set_num: int, x, y, z) -> bool:
        """Store one transmit triple (1-based index).
        
        Three ints are an integer write; anything else is a decimal write.
        Each must match the active coordinate type.
        """
        if all(_is_int(v) for v in (x, y, z)):
            return self.set_int_coordinates(set_num, x, y, z)
        return self.set_float_coordinates(set_num, x, y, z)
    
    def set_int_coordinates(self, set_num: int, x: int, y: int, z: int) -> bool:
        """Store an integer triple (1-based index)."""
        try:
            triple = IntTriple(int(x), int(y), int(z))
        except (TypeError, ValueError, OverflowError):
            return self._reject(InvalidCoordinateValue((x, y, z)))
        return self._store(set_num, triple)
    
    def set_float_coordinates(self, set_num: int, x: float, y: float, z: float) -> bool:
        """Store a decimal triple (1-based index)."""
        try:
            triple = FloatTriple(float(x), float(y), float(z))
        except (TypeError, ValueError, OverflowError):
            return self._reject(InvalidCoordinateValue((x, y, z)))
        return self._store(set_num, triple)
    
    def get_coordinates(self, set_num: int) -> Optional[Triple]:
        """Return a transmit triple (1-based index), or None if out of range."""
        if not _is_int(set_num) or not 1 <= set_num <= self._tx_sets:
            return None
        return self._transmit[set_num - 1]
    
    def reset_coordinates(self) -> None:
        """Zero every transmit triple, keeping the coordinate type."""
        self._transmit = [zero_triple(self._coord_type)] * self._max_sets
    
    @property
    def text(self) -> str:
        return self._text
    
    def set_text(self, text: Optional[str]) -> None:
        """Store the label, truncated to fit the text buffer. None is ignored.
        
        The buffer holds UTF-8 bytes, so a character cut by the limit is
        dropped whole.
        """
        if text is None:
            return
        limit = self._text_buffer_size - 1
        encoded = text.encode("utf-8")
        if len(encoded) > limit:
            logger.debug(f"Text truncated from {len(encoded)} to {limit} bytes")
            text = encoded[:limit].decode("utf-8", errors="ignore")
        self._text = text
    
    def format_output(self) -> str:
        """Return the wire string for the active transmit sets and label."""
        return CoordinateSerializer.serialize(self._transmit[:self._tx_sets], self._text)
    
    def get_formatted_output(self, buffer: bytearray) -> int:
        """Write the wire string into a caller-owned buffer.
        
        Output is truncated to fit, and the final byte of the buffer is
        always a zero terminator.
        
        Returns:
            Number of payload bytes written
        """
        return CoordinateSerializer.serialize_into(
            buffer, self._transmit[:self._tx_sets], self._text
        )
    
    # Receive side
    
    def parse_received_data(self, data: str) -> bool:
        """Decode an incoming frame such as "10,20,30,40,50,60;".
        
        On success the received sets are replaced; on failure the previous
        ones are kept.
        """
        try:
            triples = CoordinateParser.parse(data, self._rx_sets, strict=self._strict)
        except BlendixError as e:
            return self._reject(e)
        
        self._received = triples
        logger.debug(f"Received {len(triples)} coordinate set(s)")
        return self._accept()
    
    @property
    def received_num_sets(self) -> int:
        """Number of triples from the last successful decode."""
        return len(self._received)
    
    @property
    def received_coordinates(self) -> Tuple[FloatTriple, ...]:
        return self._received
    
    def get_received_coordinates(self, index: int) -> Optional[FloatTriple]:
        """Return a received triple (0-based index), or None if out of range."""
        if not _is_int(index) or not 0 <= index < len(self._received):
            return None
        return self._received[index]
    
    # Internal methods
    
    def _store(self, set_num: int, triple: Triple) -> bool:
        """Validate and store a transmit triple."""
        if not _is_int(set_num) or not 1 <= set_num <= self._tx_sets:
            return self._reject(InvalidSetIndex(set_num, self._tx_sets))
        
        requested = triple_type(triple)
        if requested != self._coord_type:
            return self._reject(VariantMismatch(requested, self._coord_type))
        
        self._transmit[set_num - 1] = triple
        return self._accept()
    
    def _accept(self) -> bool:
        self.last_error = None
        return True
    
    def _reject(self, error: BlendixError) -> bool:
        logger.warning(f"Rejected: {error}")
        self.last_error = error
        return False
