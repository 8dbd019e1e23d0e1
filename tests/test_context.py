"""Tests for RocketContext operations."""

import pytest

from rocket_sim import constants as C
from rocket_sim.config import create_test_config
from rocket_sim.context import RocketContext, parse_tick_count
from rocket_sim.errors import InvalidArgumentError
from rocket_sim.phases import FlightPhase

from conftest import RecordingObserver


def test_initial_state(rocket):
    assert rocket.phase == FlightPhase.PRELAUNCH
    assert rocket.phase_name == "Pre-Launch"
    assert rocket.fuel == 100
    assert rocket.altitude == 0.0
    assert rocket.speed == 0.0
    assert rocket.elapsed_ticks == 0
    assert not rocket.is_terminal


def test_accessors_have_no_side_effects(rocket, recorder):
    for _ in range(3):
        rocket.snapshot()
        rocket.fuel, rocket.altitude, rocket.speed, rocket.phase_name
    assert rocket.elapsed_ticks == 0
    assert len(recorder) == 0
    assert recorder.events == []


def test_tick_before_launch_counts_but_does_not_move(rocket, recorder):
    snap = rocket.tick()
    assert snap.elapsed_ticks == 1
    assert snap.phase == "Pre-Launch"
    assert (snap.fuel, snap.altitude, snap.speed) == (100, 0.0, 0.0)
    assert len(recorder) == 1


def test_launch(rocket, recorder):
    assert rocket.launch() is True
    assert rocket.phase == FlightPhase.STAGE1
    assert recorder.events == [(0, C.LEVEL_INFO, C.MSG_LAUNCH)]
    # No tick, no snapshot
    assert rocket.elapsed_ticks == 0
    assert len(recorder) == 0


def test_second_launch_is_no_op(rocket, recorder):
    rocket.launch()
    rocket.tick()
    assert rocket.launch() is False
    assert rocket.phase == FlightPhase.STAGE1
    assert [e for e in recorder.events if e[2] == C.MSG_LAUNCH] == [(0, C.LEVEL_INFO, C.MSG_LAUNCH)]


def test_checks(rocket, recorder):
    before = rocket.snapshot()
    rocket.checks()
    assert recorder.events == [(0, C.LEVEL_INFO, C.MSG_CHECKS)]
    assert rocket.snapshot() == before


def test_launch_then_six_ticks(rocket):
    rocket.launch()
    for _ in range(6):
        rocket.tick()
    assert rocket.fuel == 88
    assert rocket.altitude == pytest.approx(60.0)
    assert rocket.speed == pytest.approx(6000.0)
    assert rocket.phase_name == "Stage 1"


def test_launch_then_fast_forward_eight(rocket):
    rocket.launch()
    assert rocket.fast_forward(8) == 8
    assert rocket.fuel == 84
    assert rocket.altitude == pytest.approx(80.0)
    assert rocket.speed == pytest.approx(8000.0)
    assert rocket.phase_name == "Stage 1"
    assert rocket.elapsed_ticks == 8


def test_stage1_per_tick_deltas(rocket, recorder):
    rocket.launch()
    rocket.fast_forward(11)
    fuel = recorder.as_arrays()['fuel']
    assert all(a - b == 2 for a, b in zip(fuel[:-1], fuel[1:]))
    assert recorder.phase[-1] == "Stage 1"


def test_full_flight_reaches_orbit(rocket, recorder):
    rocket.launch()
    performed = rocket.fast_forward(1000)
    assert performed == 68
    assert rocket.phase == FlightPhase.ORBIT
    assert rocket.fuel == 20
    assert rocket.altitude == pytest.approx(400.0)
    assert rocket.speed == pytest.approx(34400.0)
    assert recorder.phase_timeline() == [(1, "Stage 1"), (12, "Stage 2"), (68, "Orbit")]
    messages = [e[2] for e in recorder.events]
    assert messages == [C.MSG_LAUNCH, C.MSG_STAGE_SEPARATION, C.MSG_ORBIT_ACHIEVED]


def test_separation_message_precedes_its_snapshot(rocket, recorder):
    rocket.launch()
    rocket.fast_forward(12)
    # Emitted during tick 12, before the tick-12 snapshot is delivered
    assert (11, C.LEVEL_INFO, C.MSG_STAGE_SEPARATION) in recorder.events
    assert recorder.phase[11] == "Stage 2"


def test_low_fuel_flight_fails(recorder):
    rocket = RocketContext(create_test_config(initial_fuel=30), observers=[recorder])
    rocket.launch()
    performed = rocket.fast_forward(100)
    assert performed == 24
    assert rocket.phase == FlightPhase.FAILED
    assert rocket.fuel == 5
    assert rocket.altitude == pytest.approx(125.0)
    assert recorder.events[-1] == (23, C.LEVEL_ERROR, C.MSG_MISSION_FAILED)


def test_fast_forward_after_terminal_is_no_op(rocket, recorder):
    rocket.launch()
    rocket.fast_forward(1000)
    before = rocket.snapshot()
    assert rocket.fast_forward(50) == 0
    assert rocket.snapshot() == before
    assert len(recorder) == 68


def test_tick_in_terminal_phase_counts_and_notifies(rocket, recorder):
    rocket.launch()
    rocket.fast_forward(1000)
    before = rocket.snapshot()
    snap = rocket.tick()
    assert snap.elapsed_ticks == before.elapsed_ticks + 1
    assert (snap.phase, snap.fuel, snap.altitude, snap.speed) == \
        (before.phase, before.fuel, before.altitude, before.speed)
    assert len(recorder) == 69


def test_fast_forward_zero(rocket):
    rocket.launch()
    assert rocket.fast_forward(0) == 0
    assert rocket.elapsed_ticks == 0


def test_fast_forward_accepts_string(rocket):
    rocket.launch()
    assert rocket.fast_forward("3") == 3
    assert rocket.fuel == 94


@pytest.mark.parametrize("bad", ["abc", "", "2.5", "-1", -1, 2.0, None, True, [3],
                                 "1_0", "\u0661\u0662", "\uff13", "0x10"])
def test_fast_forward_rejects_bad_argument(rocket, recorder, bad):
    rocket.launch()
    before = rocket.snapshot()
    with pytest.raises(InvalidArgumentError):
        rocket.fast_forward(bad)
    assert rocket.snapshot() == before
    assert len(recorder) == 0


def test_parse_tick_count():
    assert parse_tick_count(5) == 5
    assert parse_tick_count(" 7 ") == 7
    assert parse_tick_count("+4") == 4
    with pytest.raises(ValueError):
        parse_tick_count("x")


def test_observers_notified_in_registration_order():
    calls = []
    first = RecordingObserver('first', calls)
    second = RecordingObserver('second', calls)
    rocket = RocketContext(create_test_config())
    rocket.add_observer(first)
    rocket.add_observer(second)

    rocket.tick()

    assert [(name, channel) for name, channel, _ in calls] == [
        ('first', 'update'), ('second', 'update')
    ]
    assert calls[0][2] == calls[1][2]


def test_info_and_error_fan_out_in_order():
    calls = []
    rocket = RocketContext(create_test_config(), observers=[
        RecordingObserver('a', calls), RecordingObserver('b', calls)
    ])
    rocket.info("hello")
    rocket.error("boom")
    assert calls == [
        ('a', 'info', 'hello'), ('b', 'info', 'hello'),
        ('a', 'error', 'boom'), ('b', 'error', 'boom'),
    ]


def test_duplicate_observer_notified_twice():
    calls = []
    obs = RecordingObserver('dup', calls)
    rocket = RocketContext(create_test_config())
    rocket.add_observer(obs)
    rocket.add_observer(obs)
    rocket.tick()
    assert len(calls) == 2


def test_remove_observer():
    calls = []
    obs = RecordingObserver('gone', calls)
    rocket = RocketContext(create_test_config(), observers=[obs])
    rocket.remove_observer(obs)
    rocket.tick()
    assert calls == []
    assert rocket.observers == []


def test_observer_registered_during_notification_waits_for_next_tick():
    calls = []
    late = RecordingObserver('late', calls)
    rocket = RocketContext(create_test_config())

    class Registering(RecordingObserver):
        def update(self, snapshot):
            super().update(snapshot)
            if late not in rocket.observers:
                rocket.add_observer(late)

    rocket.add_observer(Registering('early', calls))
    rocket.tick()
    assert [name for name, _, _ in calls] == ['early']
    rocket.tick()
    assert [name for name, _, _ in calls] == ['early', 'early', 'late']


def test_observer_may_read_context_during_notification():
    seen = []
    rocket = RocketContext(create_test_config())

    class Reader(RecordingObserver):
        def update(self, snapshot):
            seen.append(rocket.elapsed_ticks)

    rocket.add_observer(Reader('reader', []))
    rocket.tick()
    rocket.tick()
    assert seen == [1, 2]


@pytest.mark.parametrize("text", ["1_0", "١٢", "３", "1e2", "--1"])
def test_parse_tick_count_ascii_digits_only(text):
    with pytest.raises(InvalidArgumentError):
        parse_tick_count(text)
