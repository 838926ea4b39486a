"""Abstract base class for coordinate frame protocols.

Defines how a codec's state is turned into bytes for a link and how an
incoming line is fed back into a codec.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..codec import BlendixSerial


class Protocol(ABC):
    """Abstract framing protocol.
    
    Protocols handle:
    - Serializing a codec's transmit sets into link bytes
    - Feeding one received line into a codec
    """
    
    @abstractmethod
    def serialize_frame(self, codec: BlendixSerial) -> bytes:
        """Serialize the codec's transmit state into link bytes.
        
        Args:
            codec: Codec holding the transmit sets and label
            
        Returns:
            Bytes ready to write to the link
        """
        pass
    
    @abstractmethod
    def parse_frame(self, line: bytes, codec: BlendixSerial) -> bool:
        """Decode one received line into the codec.
        
        Args:
            line: Raw line read from the link
            codec: Codec whose received sets are updated
            
        Returns:
            True if the line was accepted, False otherwise
        """
        pass
    
    @property
    @abstractmethod
    def terminator(self) -> bytes:
        """Bytes that end one frame on the link."""
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Protocol identifier (e.g., 'ascii')."""
        pass
