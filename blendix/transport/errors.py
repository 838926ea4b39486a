class PortNotFoundError(RuntimeError):
    """Raised when no matching serial port could be found."""
    pass


class MultiplePortsError(RuntimeError):
    """Raised when more than one matching serial port is found."""
    def __init__(self, message, ports):
        super().__init__(message)
        self.ports = ports  # list[PortInfo]
