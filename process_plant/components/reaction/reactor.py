"""
Reactor Component.

Passes a single inlet stream to one outlet, or splits it evenly across two.

Mass Balance:
    single mode:  ṁ_out = ṁ_in
    double mode:  ṁ_out1 = ṁ_out2 = ṁ_in / 2
"""

from typing import Any, Dict
import logging

from process_plant.core.constants import (
    REACTOR_INPUTS,
    REACTOR_SINGLE_OUTPUTS,
    REACTOR_DOUBLE_OUTPUTS,
)
from process_plant.core.device import Device
from process_plant.core.exceptions import PreconditionViolationError

logger = logging.getLogger(__name__)


class Reactor(Device):
    """
    Chemical reactor with 1 inlet and 1 or 2 outlets.

    Operating modes (fixed at construction):
        - Single output: the outlet carries the inlet mass flow unchanged.
        - Double output: each outlet carries half of the inlet mass flow.

    Both the inlet and the full set of outlets must be attached before
    update_outputs() is called.
    """

    def __init__(self, is_double_output: bool = False, **kwargs) -> None:
        """
        Args:
            is_double_output (bool): True for 2 outlets, False for 1.
            **kwargs: Passed to Device (device_id).
        """
        output_amount = REACTOR_DOUBLE_OUTPUTS if is_double_output else REACTOR_SINGLE_OUTPUTS
        super().__init__(input_amount=REACTOR_INPUTS, output_amount=output_amount, **kwargs)
        self._is_double_output = bool(is_double_output)

    @property
    def is_double_output(self) -> bool:
        return self._is_double_output

    def get_is_double_output(self) -> bool:
        """Return True if the reactor runs in double output mode."""
        return self._is_double_output

    def update_outputs(self) -> None:
        """
        Transfer or split the inlet mass flow.

        Raises:
            PreconditionViolationError: If the inlet is not connected, or the
                number of outlets differs from output_amount.
        """
        if not self._inputs:
            raise PreconditionViolationError("input not connected", self.device_id)

        if len(self._outputs) != self.output_amount:
            raise PreconditionViolationError(
                f"outputs not properly set ({len(self._outputs)} of {self.output_amount})",
                self.device_id,
            )

        input_mass = self._inputs[0].mass_flow

        if self._is_double_output:
            output_mass = input_mass / 2.0
            self._outputs[0].mass_flow = output_mass
            self._outputs[1].mass_flow = output_mass
            logger.debug(
                f"Reactor {self.device_id}: split mass {input_mass} into two outputs of {output_mass}"
            )
        else:
            self._outputs[0].mass_flow = input_mass
            logger.debug(
                f"Reactor {self.device_id}: transferred mass {input_mass} to single output"
            )

    def get_state(self) -> Dict[str, Any]:
        return {
            **super().get_state(),
            "is_double_output": self._is_double_output,
            "flow_in": float(self._inputs[0].mass_flow) if self._inputs else 0.0,
            "flow_out": [float(s.mass_flow) for s in self._outputs],
        }
