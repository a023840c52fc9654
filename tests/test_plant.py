"""Tests for the mixing tank process model and state records."""

from dataclasses import replace

import numpy as np
import pytest

from chemview.models.constants import INITIAL_COMMANDS, INITIAL_PLANT, DYNAMICS
from chemview.models.mixer import ProcessModel, advance
from chemview.models.plant_state import CommandState, PlantState, clamp_setpoint


def _make_plant(**overrides) -> PlantState:
    return PlantState.from_dict({**INITIAL_PLANT, **overrides})


def _make_cmd(**overrides) -> CommandState:
    return CommandState.from_dict({**INITIAL_COMMANDS, **overrides})


class TestPlantState:
    def test_to_dict_roundtrip(self):
        state = _make_plant(speed_rpm=120.0)
        assert PlantState.from_dict(state.to_dict()) == state

    def test_from_dict_ignores_extra_keys(self):
        state = PlantState.from_dict({**INITIAL_PLANT, "extra_key": 999})
        assert state.temperature_c == INITIAL_PLANT["temperature_c"]

    def test_immutability(self):
        state = _make_plant()
        with pytest.raises(AttributeError):
            state.speed_rpm = 10.0


class TestCommandState:
    def test_from_dict_clamps_setpoints(self):
        cmd = _make_cmd(target_speed_rpm=2000.0, target_temperature_c=5.0)
        assert cmd.target_speed_rpm == 1500.0
        assert cmd.target_temperature_c == 20.0

    def test_clamp_within_range_untouched(self):
        assert clamp_setpoint("target_speed_rpm", 750.0) == 750.0

    def test_clamp_lower_bound(self):
        assert clamp_setpoint("target_speed_rpm", -10.0) == 0.0

    def test_clamp_upper_bound(self):
        assert clamp_setpoint("target_temperature_c", 140.0) == 100.0

    def test_clamp_infinite_to_bound(self):
        assert clamp_setpoint("target_speed_rpm", float("inf")) == 1500.0
        assert clamp_setpoint("target_speed_rpm", float("-inf")) == 0.0

    def test_clamp_rejects_nan(self):
        with pytest.raises(ValueError):
            clamp_setpoint("target_speed_rpm", float("nan"))

    def test_direct_construction_clamps(self):
        cmd = CommandState(
            running=False,
            manual_mode=True,
            heater_on=False,
            target_speed_rpm=9000.0,
            target_temperature_c=-3.0,
        )
        assert cmd.target_speed_rpm == 1500.0
        assert cmd.target_temperature_c == 20.0

    def test_replace_clamps(self):
        cmd = replace(_make_cmd(), target_temperature_c=250.0)
        assert cmd.target_temperature_c == 100.0


class TestSpeed:
    def test_stopped_decays_by_fixed_step(self, fixed_rng):
        nxt = advance(_make_plant(speed_rpm=100.0), _make_cmd(running=False), fixed_rng)
        assert nxt.speed_rpm == 85.0

    def test_stopped_decay_floors_at_zero(self, fixed_rng):
        nxt = advance(_make_plant(speed_rpm=10.0), _make_cmd(running=False), fixed_rng)
        assert nxt.speed_rpm == 0.0

    def test_manual_first_order_approach(self, fixed_rng):
        cmd = _make_cmd(running=True, manual_mode=True, target_speed_rpm=500.0)
        nxt = advance(_make_plant(speed_rpm=0.0), cmd, fixed_rng)
        assert nxt.speed_rpm == 50.0

    def test_manual_approach_from_above(self, fixed_rng):
        cmd = _make_cmd(running=True, manual_mode=True, target_speed_rpm=200.0)
        nxt = advance(_make_plant(speed_rpm=400.0), cmd, fixed_rng)
        assert nxt.speed_rpm == pytest.approx(380.0)

    def test_auto_target_includes_jitter(self, fixed_rng):
        # fraction 0.5 -> jitter 25, target 475
        cmd = _make_cmd(running=True, manual_mode=False)
        nxt = advance(_make_plant(speed_rpm=0.0), cmd, fixed_rng)
        assert nxt.speed_rpm == pytest.approx(47.5)

    def test_speed_never_negative(self):
        rng = np.random.default_rng(7)
        plant = _make_plant(speed_rpm=40.0)
        commands = [
            _make_cmd(running=False),
            _make_cmd(running=True, manual_mode=True, target_speed_rpm=0.0),
            _make_cmd(running=True),
        ]
        for i in range(300):
            plant = advance(plant, commands[(i // 25) % 3], rng)
            assert plant.speed_rpm >= 0.0


class TestTemperature:
    def test_manual_linear_ramp_below_target(self, fixed_rng):
        cmd = _make_cmd(heater_on=True, manual_mode=True, target_temperature_c=60.0)
        nxt = advance(_make_plant(temperature_c=24.5), cmd, fixed_rng)
        assert nxt.temperature_c == pytest.approx(24.65)

    def test_auto_target_is_75(self, fixed_rng):
        cmd = _make_cmd(heater_on=True, manual_mode=False, target_temperature_c=20.0)
        nxt = advance(_make_plant(temperature_c=70.0), cmd, fixed_rng)
        assert nxt.temperature_c == pytest.approx(70.15)

    def test_hold_at_target_is_noise_only(self):
        cmd = _make_cmd(heater_on=True, manual_mode=True, target_temperature_c=60.0)
        rng = np.random.default_rng(3)
        for _ in range(50):
            nxt = advance(_make_plant(temperature_c=60.0), cmd, rng)
            assert abs(nxt.temperature_c - 60.0) <= DYNAMICS["hold_noise"]

    def test_heater_off_cools_toward_ambient(self, fixed_rng):
        nxt = advance(_make_plant(temperature_c=30.0), _make_cmd(heater_on=False), fixed_rng)
        assert nxt.temperature_c == pytest.approx(29.95)

    def test_heater_off_at_ambient_only_jitters(self):
        rng = np.random.default_rng(11)
        for _ in range(50):
            nxt = advance(_make_plant(temperature_c=22.0), _make_cmd(heater_on=False), rng)
            assert abs(nxt.temperature_c - 22.0) <= DYNAMICS["ambient_noise"]


class TestAcidity:
    def test_drifts_toward_moving_target(self, fixed_rng):
        # fraction 0.5 -> target 7.4
        nxt = advance(_make_plant(acidity=7.0), _make_cmd(), fixed_rng)
        assert nxt.acidity == pytest.approx(7.0 + 0.4 * 0.05)

    def test_drift_independent_of_run_state(self, fixed_rng):
        plant = _make_plant(acidity=6.0)
        stopped = advance(plant, _make_cmd(running=False), fixed_rng)
        running = advance(plant, _make_cmd(running=True), fixed_rng)
        assert stopped.acidity == running.acidity

    def test_converges_into_band(self):
        rng = np.random.default_rng(5)
        plant = _make_plant(acidity=4.0)
        for _ in range(400):
            plant = advance(plant, _make_cmd(), rng)
        assert 7.0 < plant.acidity < 7.8


class TestValveDrift:
    def test_flips_when_idle_in_auto(self, drifting_rng):
        nxt = advance(_make_plant(speed_rpm=0.0, valve_open=False), _make_cmd(), drifting_rng)
        assert nxt.valve_open is True

    def test_no_flip_when_draw_misses(self, fixed_rng):
        nxt = advance(_make_plant(speed_rpm=0.0), _make_cmd(), fixed_rng)
        assert nxt.valve_open is False

    def test_no_flip_in_manual_mode(self, drifting_rng):
        nxt = advance(_make_plant(), _make_cmd(manual_mode=True), drifting_rng)
        assert nxt.valve_open is False

    def test_no_flip_while_running(self, drifting_rng):
        nxt = advance(_make_plant(), _make_cmd(running=True), drifting_rng)
        assert nxt.valve_open is False

    def test_no_flip_while_interlocked_by_speed(self, drifting_rng):
        nxt = advance(_make_plant(speed_rpm=3.0), _make_cmd(), drifting_rng)
        assert nxt.valve_open is False


class TestProcessModel:
    def test_step_does_not_mutate_input(self, fixed_rng):
        model = ProcessModel(rng=fixed_rng)
        plant = _make_plant(speed_rpm=100.0)
        model.step(plant, _make_cmd())
        assert plant.speed_rpm == 100.0

    def test_seeded_models_agree(self):
        a = ProcessModel(seed=42)
        b = ProcessModel(seed=42)
        cmd = _make_cmd(running=True, heater_on=True)
        pa = pb = _make_plant()
        for _ in range(20):
            pa, pb = a.step(pa, cmd), b.step(pb, cmd)
        assert pa == pb
