from process_plant.config.loaders import ConfigLoader, load_flowsheet_config
from process_plant.core.enums import DeviceType
from process_plant.core.exceptions import ConfigurationError
import pytest



def test_load_yaml_configuration(tmp_path):
    """Test loading YAML configuration."""

    yaml_content = """
name: "Test Flowsheet"
version: 1.0
streams:
  - name: feed
    mass_flow: 20.0
devices:
  - id: reactor_1
    type: reactor
    inputs: [feed]
    outputs: [product]
"""

    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(yaml_content)

    config = load_flowsheet_config(config_file)

    assert config.name == "Test Flowsheet"
    assert config.version == "1.0"
    assert config.streams[0].mass_flow == 20.0
    assert config.devices[0].type is DeviceType.REACTOR
    assert config.devices[0].double_output is False


def test_load_json_configuration(tmp_path):
    """Test loading JSON configuration."""
    json_content = """
{
  "name": "Test JSON Flowsheet",
  "devices": [
    {"id": "mixer_1", "type": "mixer", "inputs_count": 3, "inputs": ["a"], "outputs": ["b"]}
  ]
}
"""
    config_file = tmp_path / "test_config.json"
    config_file.write_text(json_content)

    config = load_flowsheet_config(config_file)

    assert config.devices[0].inputs_count == 3
    assert config.streams == []


def test_mixer_inputs_count_defaults_to_wired_inlets():
    config = ConfigLoader().load_dict({
        "devices": [{"id": "m", "type": "mixer", "inputs": ["a", "b"], "outputs": ["c"]}]
    })
    assert config.devices[0].inputs_count == 2


def test_load_sample_configuration(sample_config_path):
    config = load_flowsheet_config(sample_config_path)
    assert [d.id for d in config.devices] == ["mixer_1", "reactor_1"]


def test_load_nonexistent_file():
    """Test loading a nonexistent configuration file."""
    with pytest.raises(ConfigurationError, match="not found"):
        load_flowsheet_config("nonexistent_config.yaml")


def test_unsupported_format(tmp_path):
    config_file = tmp_path / "flowsheet.toml"
    config_file.write_text("")
    with pytest.raises(ConfigurationError, match="Unsupported"):
        load_flowsheet_config(config_file)


def test_load_invalid_yaml(tmp_path):
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("devices: [unclosed\n")

    with pytest.raises(ConfigurationError, match="parse YAML"):
        load_flowsheet_config(config_file)


def test_schema_rejects_unknown_device_type(tmp_path):
    config_file = tmp_path / "bad_type.yaml"
    config_file.write_text("""
devices:
  - id: sep_1
    type: separator
""")
    with pytest.raises(ConfigurationError, match="Schema validation failed"):
        load_flowsheet_config(config_file)


def test_schema_rejects_negative_inputs_count():
    with pytest.raises(ConfigurationError):
        ConfigLoader().load_dict({"devices": [{"id": "m", "type": "mixer", "inputs_count": -1}]})


def test_reactor_with_inputs_count_rejected():
    with pytest.raises(ConfigurationError, match="only valid for mixers"):
        ConfigLoader().load_dict({"devices": [{"id": "r", "type": "reactor", "inputs_count": 1}]})


def test_duplicate_device_ids_rejected():
    with pytest.raises(ConfigurationError, match="Duplicate device IDs"):
        ConfigLoader().load_dict({
            "devices": [
                {"id": "r", "type": "reactor"},
                {"id": "r", "type": "reactor"},
            ]
        })


def test_non_mapping_rejected():
    with pytest.raises(ConfigurationError, match="mapping"):
        ConfigLoader().load_dict(["not", "a", "mapping"])


def test_load_invalid_json(tmp_path):
    config_file = tmp_path / "broken.json"
    config_file.write_text('{"devices": [')

    with pytest.raises(ConfigurationError, match="parse JSON"):
        load_flowsheet_config(config_file)


def test_missing_schema_file(tmp_path):
    with pytest.raises(ConfigurationError, match="Could not load schema"):
        ConfigLoader(schema_path=tmp_path / "missing_schema.json")


def test_unparsable_schema_file(tmp_path):
    schema_file = tmp_path / "schema.json"
    schema_file.write_text("{not json")

    with pytest.raises(ConfigurationError, match="Could not load schema"):
        ConfigLoader(schema_path=schema_file)
