"""Parser for incoming coordinate frames.

Turns a ``"v1,v2,v3,...;"`` string into received triples.
Pure functions with no side effects.
"""
from __future__ import annotations

import re
from typing import List, Tuple

from ..errors import IncompleteTriple, InvalidToken, MalformedTerminator
from ..models import FloatTriple

FRAME_END = ";"
DELIMITERS = re.compile(r"[,;]")

# Numeric literal as a C atof() reads it
_NUMBER = r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)"
_NUMERIC_PREFIX = re.compile(r"\s*" + _NUMBER, re.IGNORECASE | re.ASCII)
_NUMERIC_LITERAL = re.compile(_NUMBER, re.IGNORECASE | re.ASCII)


class CoordinateParser:
    """Parser for the coordinate wire format.
    
    Tokens are split on every ',' and ';'. Only the last character is
    checked for the closing ';', so a label between ';' delimiters is just
    another token to the parser.
    """
    
    @staticmethod
    def parse(data: str, receive_sets: int, strict: bool = False) -> Tuple[FloatTriple, ...]:
        """Parse a complete frame into triples.
        
        Values beyond ``receive_sets * 3`` are ignored. The remaining
        value count must be a multiple of three.
        
        Args:
            data: Complete frame, e.g. "10,20,30,40,50,60;"
            receive_sets: Maximum number of triples to keep
            strict: Reject non-numeric tokens instead of reading them as 0
            
        Returns:
            Parsed triples, at most receive_sets of them
            
        Raises:
            MalformedTerminator: data is empty or does not end in ';'
            IncompleteTriple: value count is not a multiple of three
            InvalidToken: strict parsing met a non-numeric token
            
        Examples:
            >>> CoordinateParser.parse("1,2,3,4,5,6,7,8,9;", receive_sets=2)
            (FloatTriple(x=1.0, y=2.0, z=3.0), FloatTriple(x=4.0, y=5.0, z=6.0))
        """
        if not data or not data.endswith(FRAME_END):
            raise MalformedTerminator(f"Frame must end with {FRAME_END!r}: {data!r}")
        
        limit = max(receive_sets, 0) * 3
        values: List[float] = []
        for token in CoordinateParser.tokenize(data):
            if len(values) >= limit:
                break
            values.append(CoordinateParser.parse_token(token, strict=strict))
        
        if len(values) % 3 != 0:
            raise IncompleteTriple(len(values))
        
        set_count = min(len(values) // 3, receive_sets)
        return tuple(
            FloatTriple(values[i], values[i + 1], values[i + 2])
            for i in range(0, set_count * 3, 3)
        )
    
    @staticmethod
    def tokenize(data: str) -> List[str]:
        """Split on ',' and ';', dropping empty tokens."""
        return [token for token in DELIMITERS.split(data) if token]
    
    @staticmethod
    def parse_token(token: str, strict: bool = False) -> float:
        """Convert one token to a float.
        
        Permissive mode reads the longest numeric prefix and falls back
        to 0.0 when there is none ("12abc" -> 12.0, "abc" -> 0.0).
        
        Raises:
            InvalidToken: strict mode and token is not exactly one numeric literal
        """
        if strict:
            if not _NUMERIC_LITERAL.fullmatch(token):
                raise InvalidToken(token)
            return float(token)
        
        match = _NUMERIC_PREFIX.match(token)
        if not match:
            return 0.0
        return float(match.group(0))
