"""Interactive simulation session: configuration checks, ticking and chart data."""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from itertools import chain

from .arx import ArxModel
from .generator import Generator, SignalKind
from .regulator import PidController
from .simulator import Simulator

logger = logging.getLogger(__name__)

MAX_OUTPUT_POINTS = 100
MAX_ERROR_POINTS = 100
MAX_PID_POINTS = 30
VISIBLE_WINDOW = 30.0
OUTPUT_MARGIN = 2.0
PID_MARGIN = 1.0
ERROR_MARGIN_RATIO = 0.1

PLANT_DISTURBANCE = 0.01
PLANT_NOISE_MEAN = 0.0
PLANT_NOISE_STDEV = 0.05


class ConfigurationError(ValueError):
    """Raised when the session is given incomplete or invalid settings."""


@dataclass(frozen=True)
class AxisRange:
    """Visible range of one chart axis."""

    low: float
    high: float

    def contains(self, value: float) -> bool:
        """Return whether ``value`` lies within the range."""
        return self.low <= value <= self.high


class Trace:
    """A sliding series of (time, value) points holding at most ``max_points``."""

    def __init__(self, max_points: int) -> None:
        if max_points < 1:
            raise ValueError(f"max_points must be positive, got {max_points}")
        self.max_points = max_points
        self._points: deque[tuple[float, float]] = deque(maxlen=max_points)

    def append(self, time: float, value: float) -> None:
        """Add a point, dropping the oldest one when the trace is full."""
        self._points.append((time, value))

    @property
    def times(self) -> list[float]:
        """Times of the stored points, oldest first."""
        return [t for t, _ in self._points]

    @property
    def values(self) -> list[float]:
        """Values of the stored points, oldest first."""
        return [v for _, v in self._points]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return iter(self._points)

    def __getitem__(self, index: int) -> tuple[float, float]:
        return self._points[index]


class SimulationSession:
    """Holds one control-loop simulation together with the data its charts show.

    Each call to :meth:`tick` corresponds to one timer period and advances the
    loop three times: once for the output chart, once for the error chart and
    once for the PID-terms chart, the time growing by one for each of them.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.simulator = Simulator()
        self.time = 0.0
        self.interval = 0
        self.running = False
        self._generator_set = False
        self._controller_set = False
        self._plant_set = False

        self.output_trace = Trace(MAX_OUTPUT_POINTS)
        self.setpoint_trace = Trace(MAX_OUTPUT_POINTS)
        self.error_trace = Trace(MAX_ERROR_POINTS)
        self.p_trace = Trace(MAX_PID_POINTS)
        self.i_trace = Trace(MAX_PID_POINTS)
        self.d_trace = Trace(MAX_PID_POINTS)

        self._output_x = AxisRange(0.0, VISIBLE_WINDOW)
        self._output_y = AxisRange(0.0, self.simulator.setpoint)
        self._error_x = AxisRange(0.0, VISIBLE_WINDOW)
        self._error_y = AxisRange(0.0, self.simulator.controller.error)
        self._pid_x = AxisRange(0.0, VISIBLE_WINDOW)
        self._pid_y = AxisRange(0.0, self.simulator.setpoint)

    @property
    def is_configured(self) -> bool:
        """Whether generator, controller and plant have all been set."""
        return self._generator_set and self._controller_set and self._plant_set

    # -- configuration -------------------------------------------------

    def configure_step(self, amplitude: float) -> None:
        """Use a step set-point switching on at the current time."""
        if amplitude == 0:
            raise ConfigurationError("step amplitude must be non-zero")
        self._set_generator(Generator(SignalKind.STEP, amplitude, 0.0, 0.0, self.time))

    def configure_sine(self, amplitude: float, period: float) -> None:
        """Use a sine set-point."""
        if amplitude == 0 or period <= 0:
            raise ConfigurationError("sine needs a non-zero amplitude and a positive period")
        self._set_generator(Generator(SignalKind.SINE, amplitude, period, 0.0, self.time))

    def configure_square(self, amplitude: float, period: float, duty: float) -> None:
        """Use a square-wave set-point."""
        if amplitude == 0 or duty == 0 or period <= 0:
            raise ConfigurationError(
                "square wave needs a non-zero amplitude and duty and a positive period"
            )
        self._set_generator(Generator(SignalKind.SQUARE, amplitude, period, duty, self.time))

    def _set_generator(self, generator: Generator) -> None:
        self.simulator.generator = generator
        self._generator_set = True

    def configure_controller(self, kp: float, ki: float, kd: float) -> None:
        """Replace the PID controller; at least one gain must be non-zero."""
        if kp == 0 and ki == 0 and kd == 0:
            raise ConfigurationError("at least one controller gain must be non-zero")
        self.simulator.controller = PidController(kp, ki, kd)
        self._controller_set = True

    def configure_plant(
        self, a: Iterable[float], b: Iterable[float], delay: float
    ) -> None:
        """Replace the ARX plant with polynomials ``a`` and ``b`` and a transport delay."""
        a_coefs: Sequence[float] = list(a)
        b_coefs: Sequence[float] = list(b)
        if all(c == 0 for c in a_coefs) or all(c == 0 for c in b_coefs):
            raise ConfigurationError("both plant polynomials need a non-zero coefficient")
        self.simulator.plant = ArxModel(
            delay,
            PLANT_DISTURBANCE,
            a_coefs,
            b_coefs,
            self.rng,
            PLANT_NOISE_MEAN,
            PLANT_NOISE_STDEV,
        )
        self._plant_set = True

    def set_interval(self, text: str) -> None:
        """Set the tick interval in milliseconds from its textual form."""
        try:
            value = int(text.strip())
        except ValueError:
            value = 0
        if value <= 0:
            raise ConfigurationError(f"invalid time interval: {text!r}")
        self.interval = value

    # -- running -------------------------------------------------------

    def start(self) -> int:
        """Mark the session running and return the tick interval in milliseconds."""
        if not self.is_configured or self.interval <= 0:
            raise ConfigurationError("not all settings have been provided")
        self.running = True
        return self.interval

    def stop(self) -> None:
        """Pause the session; the loop state is kept."""
        self.running = False

    def reset_integral_derivative(self) -> None:
        """Clear the controller's integral and derivative contributions."""
        controller = self.simulator.controller
        controller.reset_integral()
        controller.reset_derivative()

    def tick(self) -> float:
        """Run one timer period and return the plant output shown on the output chart."""
        output = self._update_output()
        self._update_error()
        self._update_pid()
        return output

    def _update_output(self) -> float:
        t = self.time
        output = self.simulator.step(t)
        setpoint = self.simulator.setpoint
        self.output_trace.append(t, output)
        self.setpoint_trace.append(t, setpoint)

        if t > VISIBLE_WINDOW:
            self._output_x = AxisRange(t - VISIBLE_WINDOW, t)

        generator = self.simulator.generator
        if generator.kind is SignalKind.SINE:
            low, high = -generator.amplitude, generator.amplitude
        else:
            low, high = 0.0, setpoint
        self._output_y = AxisRange(low - OUTPUT_MARGIN, high + OUTPUT_MARGIN)

        logger.debug(
            "time=%s output=%s setpoint=%s disturbance=%s control=%s",
            t,
            output,
            setpoint,
            self.simulator.disturbance,
            self.simulator.last_control,
        )
        self.time += 1
        return output

    def _update_error(self) -> None:
        t = self.time
        self.simulator.step(t)
        self.error_trace.append(t, self.simulator.controller.error)

        if t > VISIBLE_WINDOW:
            self._error_x = AxisRange(t - VISIBLE_WINDOW, t)

        values = self.error_trace.values
        low, high = min(values), max(values)
        margin = ERROR_MARGIN_RATIO * (high - low)
        self._error_y = AxisRange(low - margin, high + margin)
        self.time += 1

    def _update_pid(self) -> None:
        t = self.time
        self.simulator.step(t)
        controller = self.simulator.controller
        self.p_trace.append(t, controller.p_term)
        self.i_trace.append(t, controller.i_term)
        self.d_trace.append(t, controller.d_term)

        if t > MAX_PID_POINTS:
            self._pid_x = AxisRange(t - MAX_PID_POINTS, t)

        values = list(chain(self.p_trace.values, self.i_trace.values, self.d_trace.values))
        low = min(values) - PID_MARGIN
        high = max(values) + PID_MARGIN
        if low < 0:
            low = 0.0
        self._pid_y = AxisRange(low, high)
        self.time += 1

    # -- chart ranges --------------------------------------------------

    def output_axis(self) -> tuple[AxisRange, AxisRange]:
        """Return the (x, y) ranges of the output chart."""
        return self._output_x, self._output_y

    def error_axis(self) -> tuple[AxisRange, AxisRange]:
        """Return the (x, y) ranges of the error chart."""
        return self._error_x, self._error_y

    def pid_axis(self) -> tuple[AxisRange, AxisRange]:
        """Return the (x, y) ranges of the PID-terms chart."""
        return self._pid_x, self._pid_y