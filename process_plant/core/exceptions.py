"""Custom exception hierarchy for the process plant model."""

from typing import Optional

from process_plant.core.enums import PortKind


class ProcessPlantError(Exception):
    """Base exception for all process_plant errors."""
    pass


class DeviceError(ProcessPlantError):
    """Base exception for device-related errors."""
    pass


class CapacityExceededError(DeviceError):
    """Raised when a stream is attached to a port collection that is already full."""

    def __init__(self, port: PortKind, capacity: int, device_id: Optional[str] = None) -> None:
        self.port = port
        self.capacity = capacity
        self.device_id = device_id
        super().__init__(
            f"Device {device_id}: {port.value} stream limit reached (capacity={capacity})"
        )


class PreconditionViolationError(DeviceError):
    """Raised when update_outputs() is called on an incompletely wired device."""

    def __init__(self, reason: str, device_id: Optional[str] = None) -> None:
        self.reason = reason
        self.device_id = device_id
        super().__init__(f"Device {device_id}: {reason}")


class DeviceUpdateError(DeviceError):
    """Raised by the flowsheet when a device fails during update_all()."""
    pass


class RegistryError(ProcessPlantError):
    """Base exception for flowsheet registry errors."""
    pass


class DeviceNotFoundError(RegistryError):
    """Raised when device ID not found in the flowsheet."""
    pass


class DuplicateDeviceError(RegistryError):
    """Raised when attempting to register a duplicate device ID."""
    pass


class StreamNotFoundError(RegistryError):
    """Raised when a stream name is not known to the flowsheet."""
    pass


class ConfigurationError(ProcessPlantError):
    """Raised for configuration loading/validation errors."""
    pass
