"""Closed control loop: generator, PID controller and ARX plant."""

from __future__ import annotations

from .arx import ArxModel
from .generator import Generator
from .regulator import PidController

_STEP_NOISE_MEAN = 0.1
_STEP_NOISE_STDEV = 0.3


class Simulator:
    """Runs the feedback loop one sample at a time.

    Each step feeds the plant with the control signal computed in the
    previous step, then updates the controller with the new plant output.
    """

    def __init__(
        self,
        generator: Generator | None = None,
        controller: PidController | None = None,
        plant: ArxModel | None = None,
    ) -> None:
        self.generator = generator if generator is not None else Generator()
        self.controller = controller if controller is not None else PidController()
        self.plant = plant if plant is not None else ArxModel()
        self.output = 0.0
        self.previous_output = 0.0
        self.last_controller_value = 0.0
        self.last_plant_output = 0.0

    @property
    def setpoint(self) -> float:
        """Set-point the controller currently follows."""
        return self.controller.setpoint

    @property
    def disturbance(self) -> float:
        """Disturbance the plant added in the last step."""
        return self.plant.disturbance

    @property
    def last_control(self) -> float:
        """Control signal most recently computed by the controller."""
        return self.controller.last_output

    def step(self, time: float) -> float:
        """Advance the loop by one sample at ``time`` and return the plant output."""
        self.controller.setpoint = self.generator.generate(time)
        self.previous_output = self.output
        self.output = self.plant.compute_output(self.controller.last_output)
        self.last_controller_value = self.controller.last_output
        self.last_plant_output = self.output
        self.controller.update_error(self.output)
        self.plant.set_noise(_STEP_NOISE_MEAN, _STEP_NOISE_STDEV)
        self.controller.compute_output()
        return self.output