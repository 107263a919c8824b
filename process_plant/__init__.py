"""
Process Plant - Main Package

Minimal chemical process flow model with:
- Named streams carrying a mass flow
- Devices with bounded inlet/outlet collections (Mixer, Reactor)
- Flowsheet registry for wiring and updating devices
- Configuration-driven flowsheet assembly (YAML/JSON)
"""

__version__ = "1.0.0"

from process_plant.core import *
from process_plant.components import *
from process_plant.config import *

__all__ = [
    # Core
    'Stream',
    'StreamFactory',
    'Device',
    'Flowsheet',

    # Enums
    'PortKind',
    'DeviceType',

    # Exceptions
    'ProcessPlantError',
    'DeviceError',
    'CapacityExceededError',
    'PreconditionViolationError',
    'DeviceUpdateError',
    'RegistryError',
    'DeviceNotFoundError',
    'DuplicateDeviceError',
    'StreamNotFoundError',
    'ConfigurationError',

    # Components
    'Mixer',
    'Reactor',

    # Configuration
    'FlowsheetConfig',
    'ConfigLoader',
    'load_flowsheet_config',
    'FlowsheetBuilder',
]
