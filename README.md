# uarsim

A small simulator of a discrete-time closed control loop. At each sample a
generator produces the set-point, a PID controller turns the control error
into a control value, and an ARX plant with a transport delay and a Gaussian
disturbance answers with its output.

## Parts

- `uarsim.generator` – `SignalKind` (`STEP`, `SINE`, `SQUARE`) and the
  `Generator` dataclass with `amplitude`, `period`, `duty` and
  `activation_time`. `generate(time)` returns the signal value;
  `describe()` returns a one-line summary of the parameters.
- `uarsim.arx` – `ArxModel`: an ARX plant given by its `a` and `b`
  coefficient lists and a transport `delay` in samples (its integer part is
  used). Each call to `compute_output(u)` adds a disturbance drawn from a
  normal distribution set with `set_noise(mean, stdev)`. The random generator
  passed in is copied, so the plant draws from its own stream. A negative
  delay or standard deviation raises `ValueError`.
- `uarsim.regulator` – `PidController` with `kp`, `ki` and `kd`. The integral
  term is the accumulated error divided by `ki` (off when `ki` is zero), the
  derivative term is `kd` times the change of the error. `update_error`,
  `compute_output`, `reset_integral` and `reset_derivative` drive it.
- `uarsim.simulator` – `Simulator`: ties a generator, a controller and a plant
  together; `step(time)` advances the loop by one sample and returns the plant
  output. The plant is fed the control value computed in the previous step,
  and after each step the plant's disturbance is set to mean 0.1 and standard
  deviation 0.3.
- `uarsim.session` – `SimulationSession`: checks the configuration
  (`configure_step`, `configure_sine`, `configure_square`,
  `configure_controller`, `configure_plant`, `set_interval`), and `start`,
  `stop`, `tick` and `reset_integral_derivative` run it. Each `tick` advances
  the loop three times and fills bounded `Trace` histories (output and
  set-point, error, and the P, I and D terms); `output_axis`, `error_axis` and
  `pid_axis` return the `AxisRange` pairs a chart of each would show.
  Incomplete or invalid settings raise `ConfigurationError`.
- `uarsim.cli` – the `uarsim` command.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
uarsim --help
```

The command configures a session, runs a number of ticks and prints one
tab-separated line per tick: time, plant output, set-point and error.

Options: `--signal {step,sine,square}`, `--amplitude`, `--period`, `--duty`,
`--kp`, `--ki`, `--kd`, `--a A1 A2 A3`, `--b B1 B2 B3`, `--delay`,
`--interval` (milliseconds), `--ticks`, `--seed` and `--realtime` (wait the
interval between ticks). Invalid settings print an error and exit with
status 1.

```
uarsim --signal sine --amplitude 2 --period 20 --ticks 50 --seed 1
```

## Library use

```python
import random

from uarsim.arx import ArxModel
from uarsim.generator import Generator, SignalKind
from uarsim.regulator import PidController
from uarsim.simulator import Simulator

plant = ArxModel(delay=1, disturbance=0.0, a=[-0.4, 0.0, 0.0], b=[0.6, 0.0, 0.0],
                 rng=random.Random(1), mean=0.0, stdev=0.0)
controller = PidController(kp=0.5, ki=10.0, kd=0.1)
generator = Generator(SignalKind.STEP, amplitude=1.0)

sim = Simulator(generator, controller, plant)
outputs = [sim.step(t) for t in range(100)]
```

## What it does not do

There is no graphical window and no plotting. `SimulationSession` keeps the
data and axis ranges that charts would need, and the command prints numbers
as text; drawing them is left to the caller. Nothing is saved to disk.