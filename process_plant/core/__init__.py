"""Core abstractions: streams, devices, flowsheet registry and errors."""

from process_plant.core.enums import PortKind, DeviceType
from process_plant.core.exceptions import (
    ProcessPlantError,
    DeviceError,
    CapacityExceededError,
    PreconditionViolationError,
    DeviceUpdateError,
    RegistryError,
    DeviceNotFoundError,
    DuplicateDeviceError,
    StreamNotFoundError,
    ConfigurationError,
)
from process_plant.core.stream import Stream, StreamFactory
from process_plant.core.device import Device
from process_plant.core.flowsheet import Flowsheet

__all__ = [
    'PortKind', 'DeviceType',
    'ProcessPlantError', 'DeviceError', 'CapacityExceededError',
    'PreconditionViolationError', 'DeviceUpdateError', 'RegistryError',
    'DeviceNotFoundError', 'DuplicateDeviceError', 'StreamNotFoundError',
    'ConfigurationError',
    'Stream', 'StreamFactory', 'Device', 'Flowsheet',
]
