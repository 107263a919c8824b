"""Flowsheet configuration: models, loaders and builder."""

from process_plant.config.models import StreamConfig, DeviceConfig, FlowsheetConfig
from process_plant.config.loaders import ConfigLoader, load_flowsheet_config
from process_plant.config.flowsheet_builder import FlowsheetBuilder

__all__ = [
    'StreamConfig', 'DeviceConfig', 'FlowsheetConfig',
    'ConfigLoader', 'load_flowsheet_config',
    'FlowsheetBuilder',
]
