from process_plant.core.stream import Stream, StreamFactory


def test_create_names_from_sequence_number():
    """Stream.create builds the name from the "s" prefix."""
    stream = Stream.create(7)
    assert stream.name == "s7"
    assert stream.mass_flow == 0.0


def test_mass_flow_accessors():
    stream = Stream.create(1)
    stream.mass_flow = 12.5
    assert stream.mass_flow == 12.5

    # No validation on mass flow
    stream.mass_flow = -3.0
    assert stream.mass_flow == -3.0


def test_set_name():
    stream = Stream.create(1)
    stream.set_name("feed")
    assert stream.name == "feed"


def test_str_rendering():
    stream = Stream(name="s2", mass_flow=10.0)
    assert str(stream) == "Stream s2 flow = 10.0"


def test_state_serialization():
    state = Stream(name="s1", mass_flow=4).get_state()
    assert state == {"name": "s1", "mass_flow": 4.0}
    assert isinstance(state["mass_flow"], float)


def test_streams_compare_by_identity():
    """Two streams with equal fields are still distinct objects."""
    a = Stream(name="s1", mass_flow=1.0)
    b = Stream(name="s1", mass_flow=1.0)
    assert a != b
    assert a == a


def test_factory_sequential_names(stream_factory):
    """A fresh factory starts at s1 and counts up."""
    names = [stream_factory.create().name for _ in range(3)]
    assert names == ["s1", "s2", "s3"]
    assert stream_factory.count == 3


def test_factory_initial_mass_flow(stream_factory):
    stream = stream_factory.create(10.0)
    assert stream.mass_flow == 10.0


def test_factory_reset(stream_factory):
    stream_factory.create()
    stream_factory.create()
    stream_factory.reset()

    assert stream_factory.count == 0
    assert stream_factory.create().name == "s1"


def test_factories_are_independent():
    """Counters are not shared between factories."""
    first = StreamFactory()
    second = StreamFactory()
    first.create()
    first.create()

    assert second.create().name == "s1"
    assert first.create().name == "s3"
