"""Abstract base class for byte links.

A Link carries complete frames between this host and a board. It knows
nothing about coordinates; the protocol layer turns codec state into
frames and back.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class Link(ABC):
    """Abstract link to a board (serial port, socket, ...)."""
    
    @abstractmethod
    def connect(self) -> bool:
        """Open the link.
        
        Returns:
            True if the link is open, False otherwise
        """
        pass
    
    @abstractmethod
    def disconnect(self) -> None:
        """Close the link. Safe to call multiple times."""
        pass
    
    @abstractmethod
    def is_connected(self) -> bool:
        pass
    
    @abstractmethod
    def write_frame(self, frame: bytes) -> bool:
        """Write one complete frame.
        
        Returns:
            True if written, False otherwise
        """
        pass
    
    @abstractmethod
    def read_frame(self) -> Optional[bytes]:
        """Read one complete frame, or None if none arrived in time."""
        pass
    
    def __enter__(self) -> Link:
        """Context manager support - connect on enter."""
        self.connect()
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager support - disconnect on exit."""
        self.disconnect()
