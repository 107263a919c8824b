"""
Enumerations shared by devices, the flowsheet and the configuration layer.

String values are used so that states and configuration files stay
human-readable and JSON-serializable.
"""

from enum import Enum


class PortKind(Enum):
    """
    Side of a device a stream is attached to.

    Carried by CapacityExceededError so callers can tell an input overflow
    from an output overflow.
    """
    INPUT = "input"
    OUTPUT = "output"


class DeviceType(Enum):
    """
    Closed set of device variants.

    Examples:
        DeviceType("mixer") is DeviceType.MIXER
    """
    MIXER = "mixer"      # N inputs -> 1 output
    REACTOR = "reactor"  # 1 input -> 1 or 2 outputs
