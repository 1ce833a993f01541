"""Command-line front end running the control-loop simulation."""

from __future__ import annotations

import argparse
import random
import sys
import time as _time

from .generator import SignalKind
from .session import ConfigurationError, SimulationSession


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the simulator command."""
    parser = argparse.ArgumentParser(
        prog="uarsim",
        description="Simulate a PID-controlled ARX plant following a reference signal.",
    )
    parser.add_argument(
        "--signal",
        choices=[kind.value for kind in SignalKind],
        default=SignalKind.STEP.value,
        help="shape of the reference signal",
    )
    parser.add_argument("--amplitude", type=float, default=1.0)
    parser.add_argument("--period", type=float, default=10.0)
    parser.add_argument("--duty", type=float, default=0.5)
    parser.add_argument("--kp", type=float, default=0.2)
    parser.add_argument("--ki", type=float, default=10.0)
    parser.add_argument("--kd", type=float, default=0.0)
    parser.add_argument(
        "--a", type=float, nargs=3, default=[-0.4, 0.0, 0.0], metavar=("A1", "A2", "A3")
    )
    parser.add_argument(
        "--b", type=float, nargs=3, default=[0.6, 0.0, 0.0], metavar=("B1", "B2", "B3")
    )
    parser.add_argument("--delay", type=float, default=1.0)
    parser.add_argument("--interval", default="100", help="tick interval in milliseconds")
    parser.add_argument("--ticks", type=_non_negative_int, default=20)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--realtime", action="store_true", help="wait the interval between ticks"
    )
    return parser


def _configure(session: SimulationSession, args: argparse.Namespace) -> None:
    kind = SignalKind(args.signal)
    if kind is SignalKind.STEP:
        session.configure_step(args.amplitude)
    elif kind is SignalKind.SINE:
        session.configure_sine(args.amplitude, args.period)
    else:
        session.configure_square(args.amplitude, args.period, args.duty)
    session.configure_controller(args.kp, args.ki, args.kd)
    session.configure_plant(args.a, args.b, args.delay)
    session.set_interval(args.interval)


def main(argv: list[str] | None = None) -> int:
    """Run the simulation and print one line per tick."""
    args = build_parser().parse_args(argv)
    session = SimulationSession(random.Random(args.seed))
    try:
        _configure(session, args)
        interval = session.start()
    except (ConfigurationError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print("time\toutput\tsetpoint\terror")
    for _ in range(args.ticks):
        tick_time = session.time
        output = session.tick()
        setpoint = session.setpoint_trace[-1][1]
        error = session.error_trace[-1][1]
        print(f"{tick_time:g}\t{output:.6f}\t{setpoint:.6f}\t{error:.6f}")
        if args.realtime:
            _time.sleep(interval / 1000.0)
    session.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())