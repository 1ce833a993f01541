"""Closed-loop control simulation: signal generator, PID controller, ARX plant, session and command."""

__version__ = "0.1.0"

__all__ = ["arx", "cli", "generator", "regulator", "session", "simulator"]