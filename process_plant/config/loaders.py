"""
Configuration loading with validation.

Supports YAML and JSON formats with JSON Schema validation, followed by
pydantic model validation.
"""

import yaml
import json
from pathlib import Path
from typing import Any, Dict
import jsonschema
import logging

from pydantic import ValidationError

from process_plant.config.models import FlowsheetConfig
from process_plant.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Flowsheet configuration loader with schema validation.

    Example:
        loader = ConfigLoader()
        config = loader.load_yaml("configs/mixer_reactor.yaml")
    """

    def __init__(self, schema_path: Path = None):
        """
        Args:
            schema_path: Path to JSON schema file (uses default if None)
        """
        if schema_path is None:
            schema_path = Path(__file__).parent / "schemas" / "flowsheet_schema_v1.json"

        self.schema_path = Path(schema_path)
        self.schema = self._load_schema()

    def _load_schema(self) -> Dict[str, Any]:
        try:
            with open(self.schema_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Could not load schema from {self.schema_path}: {e}") from e

    def load_yaml(self, config_path: Path | str) -> FlowsheetConfig:
        """
        Load configuration from YAML file.

        Raises:
            ConfigurationError: If file not found, unparsable or invalid
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML: {e}") from e

        return self.load_dict(config_dict)

    def load_json(self, config_path: Path | str) -> FlowsheetConfig:
        """
        Load configuration from JSON file.

        Raises:
            ConfigurationError: If file not found, unparsable or invalid
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse JSON: {e}") from e

        return self.load_dict(config_dict)

    def load_dict(self, config_dict: Dict[str, Any]) -> FlowsheetConfig:
        """
        Validate a configuration dictionary and build a FlowsheetConfig.

        Raises:
            ConfigurationError: If schema or model validation fails
        """
        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(config_dict).__name__}"
            )

        try:
            jsonschema.validate(instance=config_dict, schema=self.schema)
            logger.debug("JSON schema validation passed")
        except jsonschema.ValidationError as e:
            raise ConfigurationError(f"Schema validation failed: {e.message}") from e

        try:
            config = FlowsheetConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        logger.info(f"Loaded configuration: {config.name} v{config.version}")
        return config


def load_flowsheet_config(config_path: Path | str) -> FlowsheetConfig:
    """
    Convenience function to load a flowsheet configuration.

    Automatically detects YAML or JSON based on file extension.

    Example:
        config = load_flowsheet_config("configs/mixer_reactor.yaml")
    """
    loader = ConfigLoader()
    config_path = Path(config_path)

    if config_path.suffix in ['.yaml', '.yml']:
        return loader.load_yaml(config_path)
    elif config_path.suffix == '.json':
        return loader.load_json(config_path)
    else:
        raise ConfigurationError(f"Unsupported file format: {config_path.suffix}")
