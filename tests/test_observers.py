"""Tests for observer implementations."""

import io
import logging

import numpy as np
import pytest

from rocket_sim import constants as C
from rocket_sim.observers import ConsoleObserver, LoggingObserver, Observer, TelemetryRecorder
from rocket_sim.state import Snapshot


@pytest.fixture
def snap():
    return Snapshot(phase="Stage 1", fuel=88, altitude=60.0, speed=6000.0, elapsed_ticks=6)


def test_base_observer_is_no_op(snap):
    obs = Observer()
    obs.update(snap)
    obs.info("x")
    obs.error("y")


def test_console_observer_format(snap):
    out = io.StringIO()
    obs = ConsoleObserver(stream=out)
    obs.update(snap)
    obs.info(C.MSG_LAUNCH)
    obs.error(C.MSG_MISSION_FAILED)
    assert out.getvalue().splitlines() == [
        "Stage: Stage 1, Fuel: 88%, Altitude: 60.0 km, Speed: 6000 km/h",
        C.MSG_LAUNCH,
        C.MSG_MISSION_FAILED,
    ]


def test_console_observer_defaults_to_stdout(snap, capsys):
    ConsoleObserver().update(snap)
    assert "Fuel: 88%" in capsys.readouterr().out


def test_logging_observer(snap, caplog):
    obs = LoggingObserver(logging.getLogger("rocket_sim.test"))
    with caplog.at_level(logging.DEBUG, logger="rocket_sim.test"):
        obs.update(snap)
        obs.info("all good")
        obs.error("not good")
    levels = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert levels[0][0] == logging.DEBUG
    assert "t=6" in levels[0][1]
    assert levels[1] == (logging.INFO, "all good")
    assert levels[2] == (logging.ERROR, "not good")


def test_recorder_arrays(snap):
    rec = TelemetryRecorder()
    rec.update(snap)
    rec.update(Snapshot("Stage 1", 86, 70.0, 7000.0, 7))
    data = rec.as_arrays()
    assert len(rec) == 2
    np.testing.assert_array_equal(data['tick'], [6, 7])
    np.testing.assert_array_equal(data['fuel'], [88, 86])
    np.testing.assert_allclose(data['altitude'], [60.0, 70.0])
    np.testing.assert_allclose(data['speed'], [6000.0, 7000.0])


def test_recorder_events_indexed_by_snapshot_count(snap):
    rec = TelemetryRecorder()
    rec.info("before")
    rec.update(snap)
    rec.error("after")
    assert rec.events == [(0, C.LEVEL_INFO, "before"), (1, C.LEVEL_ERROR, "after")]


def test_recorder_summary_empty():
    summary = TelemetryRecorder().summary()
    assert summary['ticks'] == 0
    assert summary['final_phase'] is None
    assert summary['phase_timeline'] == []


def test_recorder_summary(rocket, recorder):
    rocket.launch()
    rocket.fast_forward(1000)
    summary = recorder.summary()
    assert summary['ticks'] == 68
    assert summary['final_phase'] == "Orbit"
    assert summary['final_fuel'] == 20
    assert summary['peak_altitude'] == pytest.approx(400.0)
    assert summary['peak_speed'] == pytest.approx(34400.0)
    assert summary['phase_timeline'][1] == (12, "Stage 2")
