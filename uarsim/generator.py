"""Reference signal generators: step, sine and square waves."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass

# The value of pi the signal shapes are defined with.
_PI = 3.14159265359


class SignalKind(enum.Enum):
    """Shape of the generated reference signal."""

    STEP = "step"
    SINE = "sine"
    SQUARE = "square"


@dataclass
class Generator:
    """Produces the set-point value of a control loop for a given time.

    ``duty`` is the fraction of the period a square wave spends high;
    ``activation_time`` is the moment a step switches on.
    """

    kind: SignalKind = SignalKind.STEP
    amplitude: float = 0.0
    period: float = 0.0
    duty: float = 0.0
    activation_time: float = 0.0

    def generate(self, time: float) -> float:
        """Return the signal value at ``time``."""
        if self.kind is SignalKind.STEP:
            return self.amplitude if time >= self.activation_time else 0.0
        if self.kind is SignalKind.SINE:
            if self.period == 0:
                return math.nan
            phase = math.fmod(time, self.period)
            return self.amplitude * math.sin((2 * _PI / self.period) * phase)
        if self.kind is SignalKind.SQUARE:
            if self.period == 0:
                return 0.0
            phase = math.fmod(time, self.period)
            return self.amplitude if phase < self.duty * self.period else 0.0
        return 0.0

    def describe(self) -> str:
        """Return a one-line summary of the generator's parameters."""
        return (
            f"Signal kind: {self.kind.value}"
            f", amplitude: {self.amplitude:g}"
            f", period: {self.period:g}"
            f", duty/phase: {self.duty:g}"
            f", activation time (step): {self.activation_time:g}"
        )