import pytest

from process_plant.components.mixing.mixer import Mixer
from process_plant.components.reaction.reactor import Reactor
from process_plant.config.flowsheet_builder import FlowsheetBuilder
from process_plant.config.loaders import load_flowsheet_config
from process_plant.core.exceptions import CapacityExceededError, ConfigurationError



def test_build_from_sample_file(sample_config_path):
    builder = FlowsheetBuilder.from_file(sample_config_path)
    flowsheet = builder.flowsheet

    assert flowsheet.name == "Mixer-Reactor Demo"
    assert isinstance(flowsheet.get("mixer_1"), Mixer)
    assert isinstance(flowsheet.get("reactor_1"), Reactor)
    assert flowsheet.get("reactor_1").get_is_double_output() is True
    assert len(flowsheet.get_by_type("mixer")) == 1

    flowsheet.update_all()

    assert flowsheet.get_stream("s3").mass_flow == pytest.approx(15.0)
    assert flowsheet.get_stream("s4").mass_flow == pytest.approx(7.5)
    assert flowsheet.get_stream("s5").mass_flow == pytest.approx(7.5)


def test_build_from_config_object(sample_config_path):
    config = load_flowsheet_config(sample_config_path)
    builder = FlowsheetBuilder.from_config(config)
    assert builder.flowsheet.get_device_count() == 2


def test_undeclared_streams_start_empty():
    builder = FlowsheetBuilder.from_dict({
        "devices": [{"id": "r", "type": "reactor", "inputs": ["a"], "outputs": ["b"]}]
    })
    assert builder.flowsheet.get_stream("a").mass_flow == 0.0
    assert builder.flowsheet.get_stream("b").mass_flow == 0.0


def test_shared_stream_between_devices(sample_config_path):
    """Outlet of one device and inlet of the next are the same object."""
    builder = FlowsheetBuilder.from_file(sample_config_path)
    flowsheet = builder.flowsheet
    mixer_out = flowsheet.get("mixer_1").outputs[0]
    reactor_in = flowsheet.get("reactor_1").inputs[0]
    assert mixer_out is reactor_in


def test_capacity_violation_in_config():
    with pytest.raises(ConfigurationError, match="Invalid wiring") as exc_info:
        FlowsheetBuilder.from_dict({
            "devices": [
                {"id": "r", "type": "reactor", "double_output": False, "outputs": ["a", "b"]}
            ]
        })
    assert isinstance(exc_info.value.__cause__, CapacityExceededError)


def test_mixer_over_declared_inputs_count():
    with pytest.raises(ConfigurationError):
        FlowsheetBuilder.from_dict({
            "devices": [
                {"id": "m", "type": "mixer", "inputs_count": 1, "inputs": ["a", "b"], "outputs": ["c"]}
            ]
        })
