"""Discrete PID controller."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PidController:
    """PID controller working on the error between set-point and measurement.

    The integral term is the accumulated error divided by ``ki``; it is off
    when ``ki`` is zero. The derivative term is ``kd`` times the change of the
    error since the previous sample.
    """

    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0
    setpoint: float = field(default=0.0, init=False)
    error: float = field(default=0.0, init=False)
    previous_error: float = field(default=0.0, init=False)
    error_sum: float = field(default=0.0, init=False)
    last_output: float = field(default=0.0, init=False)
    p_term: float = field(default=0.0, init=False)
    i_term: float = field(default=0.0, init=False)
    d_term: float = field(default=0.0, init=False)

    def update_error(self, measured: float) -> None:
        """Compute the new error from the measured value."""
        self.previous_error = self.error
        self.error = self.setpoint - measured
        if self.ki != 0:
            self.error_sum += self.error

    def compute_output(self) -> float:
        """Compute and return the control signal for the current error."""
        self.p_term = self.kp * self.error
        self.i_term = self.error_sum / self.ki if self.ki != 0 else 0.0
        self.d_term = self.kd * (self.error - self.previous_error)
        self.last_output = self.p_term + self.i_term + self.d_term
        return self.last_output

    def reset_integral(self) -> None:
        """Clear the accumulated error and the integral term."""
        self.error_sum = 0.0
        self.i_term = 0.0

    def reset_derivative(self) -> None:
        """Clear the integral and derivative terms, keeping the accumulated error."""
        self.i_term = 0.0
        self.d_term = 0.0