"""Discrete ARX plant model with Gaussian disturbance."""

from __future__ import annotations

import random
from collections.abc import Iterable


class ArxModel:
    """ARX process: y(i) = sum b_j u(i-k-j) - sum a_j y(i-1-j) + noise.

    ``delay`` is the transport delay in samples (its integer part is used),
    ``a`` and ``b`` are the output and input polynomial coefficients. The
    random generator passed in is copied, so the model draws its noise from
    its own independent stream.
    """

    def __init__(
        self,
        delay: float = 0.0,
        disturbance: float = 0.0,
        a: Iterable[float] = (),
        b: Iterable[float] = (),
        rng: random.Random | None = None,
        mean: float = 0.3,
        stdev: float = 0.0,
    ) -> None:
        self.delay = delay
        self.disturbance = disturbance
        self.a = list(a)
        self.b = list(b)
        self._inputs = [0.0] * (len(self.b) + int(self.delay))
        self._outputs = [0.0] * len(self.a)
        self.rng = random.Random()
        if rng is not None:
            self.rng.setstate(rng.getstate())
        self._mean = 0.0
        self._stdev = 0.0
        self.set_noise(mean, stdev)

    @property
    def delay(self) -> float:
        """Transport delay in samples."""
        return self._delay

    @delay.setter
    def delay(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"delay must not be negative, got {value}")
        self._delay = value

    @property
    def mean(self) -> float:
        """Mean of the disturbance."""
        return self._mean

    @property
    def stdev(self) -> float:
        """Standard deviation of the disturbance."""
        return self._stdev

    def set_noise(self, mean: float, stdev: float) -> None:
        """Set the distribution the disturbance is drawn from."""
        if stdev < 0:
            raise ValueError(f"standard deviation must not be negative, got {stdev}")
        self._mean = mean
        self._stdev = stdev

    def compute_output(self, u: float) -> float:
        """Feed input ``u``, advance one sample and return the new output."""
        lag = int(self.delay)
        self._inputs.append(u)
        if len(self._inputs) > len(self.b) + lag:
            del self._inputs[0]

        result = sum(
            coef * self._inputs[-1 - j - lag]
            for j, coef in enumerate(self.b)
            if len(self._inputs) > j + lag
        )
        result -= sum(
            coef * self._outputs[-1 - j]
            for j, coef in enumerate(self.a)
            if len(self._outputs) > j
        )

        self.disturbance = self.rng.gauss(self._mean, self._stdev)
        result += self.disturbance

        self._outputs.append(result)
        if len(self._outputs) > len(self.a):
            del self._outputs[0]
        return result