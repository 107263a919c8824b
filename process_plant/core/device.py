"""
Core device abstractions for the process plant model.

This module defines the Device abstract base class that all process units
(mixers, reactors) inherit from. A device owns two bounded, ordered
collections of Stream references and recomputes its output streams from its
input streams on update_outputs().
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple
import logging

from process_plant.core.enums import PortKind
from process_plant.core.exceptions import CapacityExceededError
from process_plant.core.stream import Stream

logger = logging.getLogger(__name__)


class Device(ABC):
    """
    Abstract base class for all process devices.

    Lifecycle:

    1. Construction: subclass fixes input/output capacities
    2. Wiring: add_input()/add_output() attach shared Stream objects
    3. update_outputs(): read input mass flows, write output mass flows

    update_outputs() may be called any number of times; it recomputes
    deterministically from the current input values.

    Invariant: len(inputs) <= input_amount and len(outputs) <= output_amount.
    Attaching beyond capacity raises CapacityExceededError and leaves the
    collection untouched.

    Attributes:
        device_id: Identifier set by the Flowsheet (or passed as kwarg)
        input_amount: Maximum number of input streams
        output_amount: Maximum number of output streams
    """

    def __init__(self, input_amount: int, output_amount: int, **kwargs) -> None:
        """
        Initialize device with empty stream collections.

        Args:
            input_amount: Input capacity
            output_amount: Output capacity
            **kwargs:
                - device_id: Optional explicit ID (for tests/manual wiring)
        """
        if input_amount < 0 or output_amount < 0:
            raise ValueError(
                f"Capacities must be non-negative, got inputs={input_amount}, outputs={output_amount}"
            )

        self.device_id: Optional[str] = kwargs.pop("device_id", None)
        self.input_amount: int = input_amount
        self.output_amount: int = output_amount
        self._inputs: List[Stream] = []
        self._outputs: List[Stream] = []

    @property
    def inputs(self) -> Tuple[Stream, ...]:
        """Attached input streams, in attachment order."""
        return tuple(self._inputs)

    @property
    def outputs(self) -> Tuple[Stream, ...]:
        """Attached output streams, in attachment order."""
        return tuple(self._outputs)

    def set_device_id(self, device_id: str) -> None:
        """
        Set unique device identifier (called by Flowsheet.register).
        """
        self.device_id = device_id

    def add_input(self, stream: Stream) -> None:
        """
        Attach an input stream.

        Raises:
            CapacityExceededError: If input_amount streams are already attached
        """
        if len(self._inputs) >= self.input_amount:
            raise CapacityExceededError(PortKind.INPUT, self.input_amount, self.device_id)
        self._inputs.append(stream)
        logger.debug(f"{self.device_id}: attached input {stream.name}")

    def add_output(self, stream: Stream) -> None:
        """
        Attach an output stream.

        Raises:
            CapacityExceededError: If output_amount streams are already attached
        """
        if len(self._outputs) >= self.output_amount:
            raise CapacityExceededError(PortKind.OUTPUT, self.output_amount, self.device_id)
        self._outputs.append(stream)
        logger.debug(f"{self.device_id}: attached output {stream.name}")

    @abstractmethod
    def update_outputs(self) -> None:
        """
        Recompute output mass flows from input mass flows.

        Implementations must check their wiring preconditions before writing
        any output, so a failed update leaves every output unchanged.

        Raises:
            PreconditionViolationError: If required wiring is missing
        """
        pass

    def is_wired(self) -> bool:
        """True when both collections are filled to capacity."""
        return (
            len(self._inputs) == self.input_amount
            and len(self._outputs) == self.output_amount
        )

    def mass_imbalance(self) -> float:
        """Sum of output mass flows minus sum of input mass flows."""
        total_in = sum(s.mass_flow for s in self._inputs)
        total_out = sum(s.mass_flow for s in self._outputs)
        return total_out - total_in

    def get_state(self) -> Dict[str, Any]:
        """
        Return current device state for monitoring.

        Returns:
            Dictionary of JSON-serializable values. Subclasses extend it.
        """
        return {
            "device_id": self.device_id,
            "input_amount": self.input_amount,
            "output_amount": self.output_amount,
            "inputs": [s.name for s in self._inputs],
            "outputs": [s.name for s in self._outputs],
            "wired": self.is_wired(),
        }

    def get_ports(self) -> Dict[str, Dict[str, Any]]:
        """
        Describe the port collections of this device.

        Returns:
            {'inputs': {'type': 'input', 'capacity': n, 'connected': k}, ...}
        """
        return {
            'inputs': {
                'type': PortKind.INPUT.value,
                'capacity': self.input_amount,
                'connected': len(self._inputs),
            },
            'outputs': {
                'type': PortKind.OUTPUT.value,
                'capacity': self.output_amount,
                'connected': len(self._outputs),
            },
        }
