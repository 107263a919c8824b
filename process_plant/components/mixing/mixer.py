"""
Stream Mixer Component.

Combines N inlet streams into a single outlet stream.

Mass Balance:
    ṁ_out = Σ ṁ_i / n_out

The denominator is the number of attached OUTLET streams. A mixer always has
exactly one outlet, so in practice the outlet carries the plain sum of the
inlets.
"""

from typing import Any, Dict
import logging

from process_plant.core.constants import MIXER_OUTPUTS
from process_plant.core.device import Device
from process_plant.core.exceptions import PreconditionViolationError

logger = logging.getLogger(__name__)


class Mixer(Device):
    """
    Mixes up to ``inputs_count`` streams into one outlet.

    update_outputs() works with however many inlets are currently attached;
    with no inlets the outlet is set to 0.0.

    Attributes:
        inputs_count (int): Inlet capacity set at construction.
    """

    def __init__(self, inputs_count: int, **kwargs) -> None:
        """
        Args:
            inputs_count (int): Maximum number of inlet streams (>= 0).
            **kwargs: Passed to Device (device_id).
        """
        if inputs_count < 0:
            raise ValueError(f"Mixer inputs_count must be non-negative, got {inputs_count}")
        super().__init__(input_amount=inputs_count, output_amount=MIXER_OUTPUTS, **kwargs)
        self.inputs_count = inputs_count

    def update_outputs(self) -> None:
        """
        Write the mixed mass flow to every attached outlet.

        Raises:
            PreconditionViolationError: If no outlet is attached.
        """
        if not self._outputs:
            raise PreconditionViolationError(
                "outputs must be set before update", self.device_id
            )

        total_mass_flow = sum(s.mass_flow for s in self._inputs)
        output_mass = total_mass_flow / len(self._outputs)

        for stream in self._outputs:
            stream.mass_flow = output_mass

        logger.debug(
            f"Mixer {self.device_id}: {len(self._inputs)} inlets, "
            f"total={total_mass_flow}, outlet={output_mass}"
        )

    def get_state(self) -> Dict[str, Any]:
        outlet = self._outputs[0] if self._outputs else None
        return {
            **super().get_state(),
            "inputs_count": self.inputs_count,
            "flow_in_total": float(sum(s.mass_flow for s in self._inputs)),
            "flow_out": float(outlet.mass_flow) if outlet else 0.0,
        }
