"""
FlowsheetBuilder: Factory for configuration-driven flowsheet assembly.

Constructs a Flowsheet from a FlowsheetConfig: registers the declared
streams, instantiates every device and wires it to its streams.
"""

from pathlib import Path
import logging

from process_plant.components.mixing.mixer import Mixer
from process_plant.components.reaction.reactor import Reactor
from process_plant.config.loaders import ConfigLoader, load_flowsheet_config
from process_plant.config.models import DeviceConfig, FlowsheetConfig
from process_plant.core.device import Device
from process_plant.core.enums import DeviceType
from process_plant.core.exceptions import ConfigurationError, DeviceError
from process_plant.core.flowsheet import Flowsheet
from process_plant.core.stream import Stream

logger = logging.getLogger(__name__)


class FlowsheetBuilder:
    """
    Factory for building flowsheets from configuration.

    Example:
        builder = FlowsheetBuilder.from_file("configs/mixer_reactor.yaml")
        builder.flowsheet.update_all()
    """

    def __init__(self, config: FlowsheetConfig):
        self.config = config
        self.flowsheet = Flowsheet(name=config.name)

    @classmethod
    def from_file(cls, config_path: Path | str) -> 'FlowsheetBuilder':
        """Build flowsheet from a YAML/JSON configuration file."""
        config = load_flowsheet_config(config_path)
        builder = cls(config)
        builder.build()
        return builder

    @classmethod
    def from_config(cls, config: FlowsheetConfig) -> 'FlowsheetBuilder':
        builder = cls(config)
        builder.build()
        return builder

    @classmethod
    def from_dict(cls, config_dict: dict) -> 'FlowsheetBuilder':
        """Build flowsheet from a configuration dictionary (schema-validated)."""
        config = ConfigLoader().load_dict(config_dict)
        builder = cls(config)
        builder.build()
        return builder

    def build(self) -> None:
        """Register streams, then create and wire devices in declaration order."""
        logger.info(f"Building flowsheet: {self.config.name}")

        for stream_cfg in self.config.streams:
            self.flowsheet.add_stream(Stream(name=stream_cfg.name, mass_flow=stream_cfg.mass_flow))

        for device_cfg in self.config.devices:
            device = self._create_device(device_cfg)
            self.flowsheet.register(device_cfg.id, device, device_type=device_cfg.type)
            self._wire_device(device_cfg)
            logger.info(f"Created device: {device_cfg.id} ({device_cfg.type.value})")

        logger.info(
            f"Flowsheet '{self.config.name}' built: "
            f"{self.flowsheet.get_device_count()} devices, {len(self.flowsheet.streams)} streams"
        )

    def _create_device(self, device_cfg: DeviceConfig) -> Device:
        """Factory method to create a device based on its type."""
        if device_cfg.type == DeviceType.MIXER:
            return Mixer(device_cfg.inputs_count)
        elif device_cfg.type == DeviceType.REACTOR:
            return Reactor(device_cfg.double_output)
        raise ConfigurationError(f"Unknown device type for '{device_cfg.id}': {device_cfg.type}")

    def _wire_device(self, device_cfg: DeviceConfig) -> None:
        for name in device_cfg.inputs + device_cfg.outputs:
            if not self.flowsheet.has_stream(name):
                # Streams referenced but not declared start empty
                self.flowsheet.add_stream(Stream(name=name))

        try:
            self.flowsheet.connect(device_cfg.id, inlets=device_cfg.inputs, outlets=device_cfg.outputs)
        except DeviceError as e:
            raise ConfigurationError(f"Invalid wiring for device '{device_cfg.id}': {e}") from e
