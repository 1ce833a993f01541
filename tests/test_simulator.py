import random

import pytest

from uarsim.arx import ArxModel
from uarsim.generator import Generator, SignalKind
from uarsim.regulator import PidController
from uarsim.simulator import Simulator


def make_sim(seed=7, kp=0.5, ki=2.0, kd=0.1):
    gen = Generator(SignalKind.STEP, 1.0, 0.0, 0.0, 0.0)
    pid = PidController(kp, ki, kd)
    plant = ArxModel(1.0, 0.01, [-0.4, 0.0, 0.0], [0.6, 0.0, 0.0], random.Random(seed), 0.0, 0.0)
    return Simulator(gen, pid, plant)


def test_first_step_output_is_initial_noise_mean():
    sim = make_sim()
    assert sim.step(0.0) == pytest.approx(0.0)
    assert sim.setpoint == 1.0


def test_step_records_output_and_previous():
    sim = make_sim()
    first = sim.step(0.0)
    second = sim.step(1.0)
    assert sim.previous_output == first
    assert sim.output == second
    assert sim.last_plant_output == second


def test_step_switches_plant_noise():
    sim = make_sim()
    sim.step(0.0)
    assert sim.plant.mean == 0.1
    assert sim.plant.stdev == 0.3


def test_controller_sees_error_of_new_output():
    sim = make_sim()
    sim.step(0.0)
    out = sim.step(1.0)
    assert sim.controller.error == pytest.approx(sim.setpoint - out)


def test_plant_receives_previous_control_signal():
    sim = make_sim()
    sim.step(0.0)
    control_before = sim.last_control
    sim.step(1.0)
    assert sim.last_controller_value == control_before
    assert sim.last_control == pytest.approx(
        sim.controller.p_term + sim.controller.i_term + sim.controller.d_term
    )


def test_disturbance_reflects_plant():
    sim = make_sim()
    sim.step(0.0)
    sim.step(1.0)
    assert sim.disturbance == sim.plant.disturbance


def test_same_seed_gives_same_trajectory():
    a = make_sim(seed=11)
    b = make_sim(seed=11)
    traj_a = [a.step(float(t)) for t in range(20)]
    traj_b = [b.step(float(t)) for t in range(20)]
    assert traj_a == traj_b


def test_setpoint_follows_generator():
    sim = make_sim()
    sim.generator = Generator(SignalKind.SQUARE, 3.0, 4.0, 0.5)
    sim.step(0.0)
    assert sim.setpoint == 3.0
    sim.step(3.0)
    assert sim.setpoint == 0.0


def test_default_simulator_runs():
    sim = Simulator()
    assert sim.step(0.0) == pytest.approx(0.3)
    assert sim.setpoint == 0.0
    assert sim.last_control == pytest.approx(0.0)