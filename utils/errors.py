class WifiSimError(Exception):
    """
    Base class of all the errors raised by the simulator
    """


class InvalidParameterError(WifiSimError):
    """
    Malformed simulation parameters (client count, packet count, physical layer profile), rejected before any
    simulation state is created. It is always surfaced to the caller
    """


class DegenerateRunError(WifiSimError):
    """
    A run that lasted zero logical time and delivered nothing, so no throughput can be derived from it. The simulator
    recovers from it by reporting zero-valued statistics
    """
