"""
Flowsheet registry for devices and the streams they share.

The Flowsheet is the central catalog of a process model, providing:
- Device registration and lookup by ID or type
- Stream creation with a flowsheet-scoped naming counter
- Wiring helpers
- Update of all devices in registration order
- State aggregation for monitoring
"""

from typing import Any, Dict, Iterable, List, Optional, Union
from collections import defaultdict
import logging

import numpy as np

from process_plant.core.constants import MASS_BALANCE_TOLERANCE
from process_plant.core.device import Device
from process_plant.core.enums import DeviceType, PortKind
from process_plant.core.exceptions import (
    CapacityExceededError,
    DeviceNotFoundError,
    DeviceUpdateError,
    DuplicateDeviceError,
    StreamNotFoundError,
)
from process_plant.core.stream import Stream, StreamFactory

logger = logging.getLogger(__name__)


class Flowsheet:
    """
    Registry of devices and streams.

    Devices are updated in STRICT REGISTRATION ORDER, so upstream devices
    must be registered before the devices that consume their outputs.

    Example:
        flowsheet = Flowsheet()
        s1 = flowsheet.create_stream(10.0)
        s2 = flowsheet.create_stream(5.0)
        s3 = flowsheet.create_stream()

        flowsheet.register("mixer_1", Mixer(2), device_type=DeviceType.MIXER)
        flowsheet.connect("mixer_1", inlets=[s1, s2], outlets=[s3])
        flowsheet.update_all()

        s3.mass_flow  # 15.0
    """

    def __init__(self, name: str = "flowsheet") -> None:
        self.name = name
        self._devices: Dict[str, Device] = {}
        self._devices_by_type: Dict[str, List[Device]] = defaultdict(list)
        self._streams: Dict[str, Stream] = {}
        self._stream_factory = StreamFactory()

    # --- Devices ---

    def register(
        self,
        device_id: str,
        device: Device,
        device_type: Optional[Union[str, DeviceType]] = None
    ) -> None:
        """
        Register a device in the flowsheet.

        Args:
            device_id: Unique identifier for lookup
            device: Device instance to register
            device_type: Optional type tag for filtering ("mixer", DeviceType.REACTOR, ...)

        Raises:
            DuplicateDeviceError: If device_id already registered
            TypeError: If device doesn't inherit from Device
        """
        if device_id in self._devices:
            raise DuplicateDeviceError(f"Device ID '{device_id}' already registered")

        if not isinstance(device, Device):
            raise TypeError(f"Device must inherit from Device ABC, got {type(device)}")

        if isinstance(device_type, DeviceType):
            device_type = device_type.value

        device.set_device_id(device_id)
        self._devices[device_id] = device

        if device_type:
            self._devices_by_type[device_type].append(device)

        logger.debug(f"Registered device '{device_id}' (type: {device_type})")

    def get(self, device_id: str) -> Device:
        """
        Retrieve device by ID.

        Raises:
            DeviceNotFoundError: If device_id not found
        """
        if device_id not in self._devices:
            raise DeviceNotFoundError(
                f"Device '{device_id}' not found in flowsheet. "
                f"Available: {list(self._devices.keys())}"
            )
        return self._devices[device_id]

    def get_by_type(self, device_type: Union[str, DeviceType]) -> List[Device]:
        """Retrieve all devices registered with a type tag (empty if none)."""
        if isinstance(device_type, DeviceType):
            device_type = device_type.value
        return list(self._devices_by_type.get(device_type, []))

    def has(self, device_id: str) -> bool:
        return device_id in self._devices

    def get_device_count(self) -> int:
        return len(self._devices)

    def get_all_ids(self) -> List[str]:
        return list(self._devices.keys())

    # --- Streams ---

    def create_stream(self, mass_flow: float = 0.0) -> Stream:
        """
        Create and register a sequentially named stream ("s1", "s2", ...).

        Names already registered through add_stream() are skipped.
        """
        stream = self._stream_factory.create(mass_flow)
        while self.has_stream(stream.name):
            stream = self._stream_factory.create(mass_flow)
        self.add_stream(stream)
        return stream

    def rename_stream(self, old_name: str, new_name: str) -> Stream:
        """
        Rename a registered stream and re-key it in the flowsheet.

        Raises:
            StreamNotFoundError: If old_name is not registered
            ValueError: If new_name is already used by another stream
        """
        stream = self.get_stream(old_name)
        if new_name != old_name and self.has_stream(new_name):
            raise ValueError(f"Stream name '{new_name}' already used in flowsheet '{self.name}'")
        del self._streams[old_name]
        stream.set_name(new_name)
        self._streams[new_name] = stream
        return stream

    def add_stream(self, stream: Stream) -> None:
        """
        Register an externally created stream.

        Raises:
            ValueError: If a different stream with the same name is registered
        """
        existing = self._streams.get(stream.name)
        if existing is not None and existing is not stream:
            raise ValueError(f"Stream name '{stream.name}' already used in flowsheet '{self.name}'")
        self._streams[stream.name] = stream

    def get_stream(self, name: str) -> Stream:
        """
        Raises:
            StreamNotFoundError: If no stream with that name is registered
        """
        if name not in self._streams:
            raise StreamNotFoundError(f"Stream '{name}' not found in flowsheet '{self.name}'")
        return self._streams[name]

    def has_stream(self, name: str) -> bool:
        return name in self._streams

    @property
    def streams(self) -> List[Stream]:
        return list(self._streams.values())

    def connect(
        self,
        device_id: str,
        inlets: Iterable[Union[str, Stream]] = (),
        outlets: Iterable[Union[str, Stream]] = ()
    ) -> Device:
        """
        Attach streams (objects or registered names) to a device.

        Streams are attached in the given order. Stream objects not yet
        known to the flowsheet are registered.

        Raises:
            DeviceNotFoundError: Unknown device_id
            StreamNotFoundError: Unknown stream name
            CapacityExceededError: If the streams do not fit; nothing is attached
            ValueError: If a stream object clashes with a registered name
        """
        device = self.get(device_id)
        inlet_streams = [self._resolve_stream(s) for s in inlets]
        outlet_streams = [self._resolve_stream(s) for s in outlets]

        # All-or-nothing: nothing is attached or registered if either side overflows
        if len(device.inputs) + len(inlet_streams) > device.input_amount:
            raise CapacityExceededError(PortKind.INPUT, device.input_amount, device_id)
        if len(device.outputs) + len(outlet_streams) > device.output_amount:
            raise CapacityExceededError(PortKind.OUTPUT, device.output_amount, device_id)

        for stream in inlet_streams + outlet_streams:
            self.add_stream(stream)
        for stream in inlet_streams:
            device.add_input(stream)
        for stream in outlet_streams:
            device.add_output(stream)
        return device

    def _resolve_stream(self, stream: Union[str, Stream]) -> Stream:
        """Look up a stream by name, or check an object can be registered."""
        if isinstance(stream, Stream):
            existing = self._streams.get(stream.name)
            if existing is not None and existing is not stream:
                raise ValueError(f"Stream name '{stream.name}' already used in flowsheet '{self.name}'")
            return stream
        return self.get_stream(stream)

    # --- Execution ---

    def update_all(self) -> None:
        """
        Call update_outputs() on every device in registration order.

        Raises:
            DeviceUpdateError: If any device fails; chained to the original error
        """
        for device_id, device in self._devices.items():
            try:
                device.update_outputs()
            except Exception as e:
                logger.error(f"Device '{device_id}' failed to update: {e}")
                raise DeviceUpdateError(f"Device '{device_id}' update failed: {e}") from e

        logger.debug(f"Updated {len(self._devices)} devices in '{self.name}'")

    def check_mass_balance(self, device_id: str, tolerance: float = MASS_BALANCE_TOLERANCE) -> bool:
        """
        Check that a device's outputs carry the same total mass as its inputs.

        Args:
            device_id: Device to check
            tolerance: Absolute tolerance

        Returns:
            True if |Σ out - Σ in| <= tolerance
        """
        device = self.get(device_id)
        return bool(np.isclose(device.mass_imbalance(), 0.0, rtol=0.0, atol=tolerance))

    def get_all_states(self) -> Dict[str, Dict[str, Any]]:
        """
        Aggregate state from all devices and streams.

        Returns:
            {"devices": {device_id: state, ...}, "streams": {name: state, ...}}
        """
        return {
            "devices": {
                device_id: device.get_state()
                for device_id, device in self._devices.items()
            },
            "streams": {
                name: stream.get_state()
                for name, stream in self._streams.items()
            },
        }
