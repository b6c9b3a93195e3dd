"""Tests for OscillatorEngine: update rule, invariants, diagnostics."""

import math

import numpy as np
import pytest

from quakeguard.physics import (
    EulerIntegrator,
    OscillatorEngine,
    SimulationParameters,
    natural_frequency,
)


def replay_recurrence(n_ticks: int, f: float, A: float, k: float, b: float, m: float, dt: float):
    """Independent scalar replay of the per-tick update, from rest."""
    t = x = v = g = 0.0
    for _ in range(n_ticks):
        t += dt
        g = A * math.sin(2.0 * math.pi * f * t)
        relative = x - g
        acc = (-k * relative + -b * v) / m
        v += acc * dt
        x += v * dt
    return t, g, x, v


def test_initial_state_is_zero() -> None:
    engine = OscillatorEngine()
    out = engine.output()
    assert out.time == 0.0
    assert out.ground_offset == 0.0
    assert out.building_offset == 0.0
    assert out.building_velocity == 0.0


def test_golden_scenario_after_one_second() -> None:
    """Default demo parameters, 60 ticks of 1/60: t = 1 s."""
    params = SimulationParameters(
        earthquake_frequency=1.2,
        earthquake_amplitude=35.0,
        isolator_stiffness=30.0,
        isolator_damping=4.5,
        building_mass=15.0,
        time_step=1.0 / 60.0,
    )
    engine = OscillatorEngine(params)
    for _ in range(60):
        out = engine.tick()

    assert out.time == pytest.approx(1.0, abs=1e-12)
    assert out.ground_offset == pytest.approx(35.0 * np.sin(2.0 * np.pi * 1.2 * out.time), abs=1e-12)
    assert out.ground_offset == pytest.approx(33.287, abs=1e-3)

    t, g, x, v = replay_recurrence(60, 1.2, 35.0, 30.0, 4.5, 15.0, 1.0 / 60.0)
    assert out.time == t
    assert out.building_offset == pytest.approx(x, rel=1e-12, abs=1e-12)
    assert out.building_velocity == pytest.approx(v, rel=1e-12, abs=1e-12)
    # isolated building lags far behind the ground during the first second
    assert abs(out.building_offset) < abs(out.ground_offset)


def test_first_tick_matches_update_rule() -> None:
    engine = OscillatorEngine()
    out = engine.tick()
    dt = 1.0 / 60.0
    g = 35.0 * np.sin(2.0 * np.pi * 1.2 * dt)
    acc = (-30.0 * (0.0 - g)) / 15.0
    v = acc * dt
    assert out.time == dt
    assert out.ground_offset == pytest.approx(g)
    assert out.building_velocity == pytest.approx(v)
    # position uses the velocity just updated
    assert out.building_offset == pytest.approx(v * dt)


def test_ground_offset_is_pure_function_of_time() -> None:
    params = SimulationParameters(isolator_damping=0.0, earthquake_frequency=2.0, earthquake_amplitude=20.0)
    engine = OscillatorEngine(params)
    for _ in range(500):
        out = engine.tick()
        expected = 20.0 * np.sin(2.0 * np.pi * 2.0 * out.time)
        assert out.ground_offset == pytest.approx(expected, abs=1e-9)
        assert out.fixed_base_offset == out.ground_offset


def test_time_advances_by_exactly_one_step_per_tick() -> None:
    engine = OscillatorEngine(SimulationParameters(time_step=0.01))
    expected = 0.0
    for _ in range(100):
        engine.tick()
        expected += 0.01
        assert engine.time == expected


def test_rest_without_forcing_stays_at_rest() -> None:
    engine = OscillatorEngine(SimulationParameters(earthquake_amplitude=0.0))
    for _ in range(1000):
        out = engine.tick()
        assert out.ground_offset == 0.0
        assert out.building_offset == 0.0
        assert out.building_velocity == 0.0


def test_free_vibration_decays_with_damping() -> None:
    """Excite the building, remove the forcing, check that motion dies out."""
    params = SimulationParameters()
    engine = OscillatorEngine(params)
    driven_peak = 0.0
    for _ in range(600):
        driven_peak = max(driven_peak, abs(engine.tick().building_offset))
    assert driven_peak > 0.5

    free = params.with_changes(earthquake_amplitude=0.0)
    window = 300  # longer than one natural period (~267 ticks)
    peaks_x, peaks_v, energies = [], [], []
    for _ in range(6):
        xs, vs = [], []
        for _ in range(window):
            out = engine.tick(free)
            assert out.ground_offset == 0.0
            xs.append(abs(out.building_offset))
            vs.append(abs(out.building_velocity))
        peaks_x.append(max(xs))
        peaks_v.append(max(vs))
        energies.append(
            0.5 * params.building_mass * out.building_velocity ** 2
            + 0.5 * params.isolator_stiffness * out.building_offset ** 2
        )

    assert all(b < a for a, b in zip(peaks_x, peaks_x[1:]))
    assert all(b < a for a, b in zip(peaks_v, peaks_v[1:]))
    assert all(b < a for a, b in zip(energies, energies[1:]))


def test_reset_is_idempotent_and_keeps_parameters() -> None:
    params = SimulationParameters(isolator_stiffness=55.0, isolator_damping=7.0)
    engine = OscillatorEngine(params)
    for _ in range(42):
        engine.tick()
    engine.reset()
    first = engine.output()
    engine.reset()
    second = engine.output()
    assert first == second
    assert first.as_dict() == {
        "time": 0.0,
        "ground_offset": 0.0,
        "building_offset": 0.0,
        "building_velocity": 0.0,
    }
    assert engine.parameters is params


def test_runs_are_deterministic() -> None:
    schedule = [1.2] * 50 + [0.5] * 50 + [2.5] * 50

    def run():
        engine = OscillatorEngine()
        trace = []
        for f in schedule:
            params = engine.parameters.with_changes(earthquake_frequency=f)
            trace.append(engine.tick(params).as_dict())
        return trace

    assert run() == run()


def test_tick_with_params_replaces_engine_parameters() -> None:
    engine = OscillatorEngine()
    new = SimulationParameters(earthquake_frequency=0.5)
    engine.tick(new)
    assert engine.parameters is new


def test_tick_rejects_non_positive_mass() -> None:
    engine = OscillatorEngine()
    engine.tick()
    before = engine.output()
    bad = SimulationParameters()
    object.__setattr__(bad, "building_mass", 0.0)
    with pytest.raises(ValueError, match="building_mass"):
        engine.tick(bad)
    assert engine.output() == before


def test_setting_invalid_parameters_fails() -> None:
    engine = OscillatorEngine()
    bad = SimulationParameters()
    object.__setattr__(bad, "isolator_damping", -1.0)
    with pytest.raises(ValueError):
        engine.parameters = bad


def test_natural_frequency_reference_value() -> None:
    assert natural_frequency(30.0, 15.0) == pytest.approx(0.2251, abs=1e-3)
    assert natural_frequency(30.0, 15.0) == pytest.approx(np.sqrt(2.0) / (2.0 * np.pi))
    assert natural_frequency(0.0, 15.0) == 0.0


@pytest.mark.parametrize("k, m", [(-1.0, 15.0), (30.0, 0.0), (30.0, -2.0)])
def test_natural_frequency_domain(k: float, m: float) -> None:
    with pytest.raises(ValueError):
        natural_frequency(k, m)


def test_engine_natural_frequency_and_ratio() -> None:
    engine = OscillatorEngine(SimulationParameters(isolator_stiffness=60.0))
    fn = natural_frequency(60.0, 15.0)
    assert engine.natural_frequency() == pytest.approx(fn)
    assert engine.frequency_ratio() == pytest.approx(1.2 / fn)

    stiff_free = OscillatorEngine(SimulationParameters(isolator_stiffness=0.0))
    assert stiff_free.frequency_ratio() == float("inf")


def test_isolation_reduces_response_far_from_resonance() -> None:
    """Driving well above the natural frequency: building moves less than ground."""
    engine = OscillatorEngine(SimulationParameters(earthquake_frequency=2.5, isolator_stiffness=10.0))
    peak_ground = peak_building = 0.0
    for _ in range(1200):
        out = engine.tick()
        peak_ground = max(peak_ground, abs(out.ground_offset))
        peak_building = max(peak_building, abs(out.building_offset))
    assert peak_building < 0.5 * peak_ground


def test_frame_output_derived_values() -> None:
    engine = OscillatorEngine()
    for _ in range(10):
        out = engine.tick()
    assert out.isolator_drift == pytest.approx(out.building_offset - out.ground_offset)
    assert engine.fixed_base_offset == engine.ground_offset


def test_explicit_euler_integrator_is_default() -> None:
    engine = OscillatorEngine()
    assert isinstance(engine.integrator, EulerIntegrator)
    state = engine.state_dict()
    assert state["time"] == 0.0
    assert np.array_equal(state["state"], np.zeros(2))
