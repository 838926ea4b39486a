"""Error types reported by the codec."""


class BlendixError(ValueError):
    """Base class for rejected codec operations."""
    pass


class InvalidSetIndex(BlendixError):
    """1-based transmit index outside [1, tx_sets]."""
    def __init__(self, set_num, tx_sets):
        super().__init__(f"Set index {set_num} outside [1, {tx_sets}]")
        self.set_num = set_num
        self.tx_sets = tx_sets


class VariantMismatch(BlendixError):
    """Typed write while the other coordinate type is active."""
    def __init__(self, requested, active):
        super().__init__(
            f"Cannot write {requested.value} coordinates while {active.value} is active"
        )
        self.requested = requested
        self.active = active


class InvalidCount(BlendixError):
    """Negative set count, or tx_sets + rx_sets would exceed the capacity."""
    pass


class InvalidCoordinateType(BlendixError):
    """Unknown coordinate type name."""
    pass


class MalformedTerminator(BlendixError):
    """Received data is empty or does not end in ';'."""
    pass


class IncompleteTriple(BlendixError):
    """Received value count is not a multiple of three."""
    def __init__(self, value_count):
        super().__init__(f"{value_count} values do not form complete triples")
        self.value_count = value_count


class InvalidToken(BlendixError):
    """Non-numeric token, raised only by strict parsing."""
    def __init__(self, token):
        super().__init__(f"Invalid numeric token: {token!r}")
        self.token = token


class InvalidCoordinateValue(BlendixError):
    """Coordinate component that cannot be converted to a number."""
    def __init__(self, values):
        super().__init__(f"Non-numeric coordinate values: {values!r}")
        self.values = values
