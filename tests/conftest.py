import pytest

from rocket_sim.config import create_test_config
from rocket_sim.context import RocketContext
from rocket_sim.observers import Observer, TelemetryRecorder


class RecordingObserver(Observer):
    """Appends (name, channel, payload) to a shared call log."""

    def __init__(self, name, calls):
        self.name = name
        self.calls = calls

    def update(self, snapshot):
        self.calls.append((self.name, 'update', snapshot))

    def info(self, message):
        self.calls.append((self.name, 'info', message))

    def error(self, message):
        self.calls.append((self.name, 'error', message))


@pytest.fixture
def recorder():
    return TelemetryRecorder()


@pytest.fixture
def rocket(recorder):
    return RocketContext(create_test_config(), observers=[recorder])
