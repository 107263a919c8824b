"""
Stream class for mass-flow tracking.

Represents a named material flow carrying a single scalar quantity:
- Mass flow

Streams are shared by reference between the device that produces them and
the device that consumes them downstream. Nothing enforces a single writer;
callers must ensure only the producing device writes ``mass_flow`` during an
update.
"""

from dataclasses import dataclass
from typing import Any, Dict

from process_plant.core.constants import STREAM_NAME_PREFIX


@dataclass(eq=False)
class Stream:
    """
    Represents a named material flow.

    Identity is by reference: two streams with the same name and flow are
    still distinct objects.
    """
    name: str
    mass_flow: float = 0.0

    @classmethod
    def create(cls, sequence_number: int, mass_flow: float = 0.0) -> 'Stream':
        """
        Create a stream named from a sequence number.

        Args:
            sequence_number: Integer appended to the name prefix (3 -> "s3")
            mass_flow: Initial mass flow

        Returns:
            New Stream instance
        """
        return cls(name=f"{STREAM_NAME_PREFIX}{sequence_number}", mass_flow=mass_flow)

    def set_name(self, name: str) -> None:
        """
        Rename the stream.

        A stream registered in a Flowsheet is keyed by name; rename it
        through Flowsheet.rename_stream() instead.
        """
        self.name = name

    def get_state(self) -> Dict[str, Any]:
        """Return JSON-serializable stream state."""
        return {
            "name": self.name,
            "mass_flow": float(self.mass_flow),
        }

    def __str__(self) -> str:
        return f"Stream {self.name} flow = {self.mass_flow}"


class StreamFactory:
    """
    Creates sequentially named streams.

    Each factory owns its own counter, so independent flowsheets (and tests)
    never share naming state.

    Example:
        factory = StreamFactory()
        feed = factory.create(10.0)   # "s1"
        product = factory.create()    # "s2"
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError(f"StreamFactory start must be non-negative, got {start}")
        self._counter: int = start

    @property
    def count(self) -> int:
        """Number of the last stream handed out (0 if none)."""
        return self._counter

    def create(self, mass_flow: float = 0.0) -> Stream:
        """
        Create the next stream in sequence.

        The counter is incremented before naming, so a fresh factory
        produces "s1" first.
        """
        self._counter += 1
        return Stream.create(self._counter, mass_flow=mass_flow)

    def reset(self) -> None:
        """Restart naming from "s1"."""
        self._counter = 0
