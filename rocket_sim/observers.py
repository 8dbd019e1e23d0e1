"""
Rocket Ascent Simulator - Observers

Observers are callback sinks attached to a RocketContext. Each receives:
  - update(snapshot) after every tick
  - info(message) for operator information
  - error(message) for mission-level failures

Observers never hold a reference to the context.
"""

import logging
import sys
from typing import Dict, List, Optional, TextIO, Tuple

import numpy as np

from . import constants as C
from .state import Snapshot

logger = logging.getLogger(__name__)


class Observer:
    """Base observer; every channel defaults to a no-op."""

    def update(self, snapshot: Snapshot):
        pass

    def info(self, message: str):
        pass

    def error(self, message: str):
        pass


class ConsoleObserver(Observer):
    """Prints snapshots and messages to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved late so pytest's capsys sees the output
        return self._stream if self._stream is not None else sys.stdout

    def update(self, snapshot: Snapshot):
        print(str(snapshot), file=self.stream, flush=True)

    def info(self, message: str):
        print(message, file=self.stream, flush=True)

    def error(self, message: str):
        print(message, file=self.stream, flush=True)


class LoggingObserver(Observer):
    """Mirrors the observer channels onto a logger."""

    def __init__(self, log: Optional[logging.Logger] = None):
        self.log = log or logger

    def update(self, snapshot: Snapshot):
        self.log.debug(f"t={snapshot.elapsed_ticks} {snapshot}")

    def info(self, message: str):
        self.log.info(message)

    def error(self, message: str):
        self.log.error(message)


class TelemetryRecorder(Observer):
    """
    Records every snapshot and message for later analysis or plotting.

    Snapshot fields are appended to parallel lists (one entry per tick).
    Messages are stored as (snapshot_index, level, message), where
    snapshot_index is the number of snapshots received before the message.
    """

    def __init__(self):
        self.tick: List[int] = []
        self.phase: List[str] = []
        self.fuel: List[int] = []
        self.altitude: List[float] = []
        self.speed: List[float] = []
        self.events: List[Tuple[int, str, str]] = []

    def __len__(self) -> int:
        return len(self.tick)

    def update(self, snapshot: Snapshot):
        self.tick.append(snapshot.elapsed_ticks)
        self.phase.append(snapshot.phase)
        self.fuel.append(snapshot.fuel)
        self.altitude.append(snapshot.altitude)
        self.speed.append(snapshot.speed)

    def info(self, message: str):
        self.events.append((len(self.tick), C.LEVEL_INFO, message))

    def error(self, message: str):
        self.events.append((len(self.tick), C.LEVEL_ERROR, message))

    def as_arrays(self) -> Dict[str, np.ndarray]:
        """Return the numeric channels as numpy arrays."""
        return {
            'tick': np.asarray(self.tick, dtype=np.int64),
            'fuel': np.asarray(self.fuel, dtype=np.int64),
            'altitude': np.asarray(self.altitude, dtype=np.float64),
            'speed': np.asarray(self.speed, dtype=np.float64),
        }

    def phase_timeline(self) -> List[Tuple[int, str]]:
        """(tick, phase) for the first snapshot of each phase seen."""
        timeline = []
        prev_phase = None
        for tick, phase in zip(self.tick, self.phase):
            if phase != prev_phase:
                timeline.append((tick, phase))
                prev_phase = phase
        return timeline

    def summary(self) -> dict:
        """Summarize the recorded flight."""
        if not self.tick:
            return {
                'ticks': 0,
                'peak_altitude': 0.0,
                'peak_speed': 0.0,
                'final_fuel': None,
                'final_phase': None,
                'phase_timeline': [],
            }
        data = self.as_arrays()
        return {
            'ticks': int(data['tick'][-1]),
            'peak_altitude': float(np.max(data['altitude'])),
            'peak_speed': float(np.max(data['speed'])),
            'final_fuel': int(data['fuel'][-1]),
            'final_phase': self.phase[-1],
            'phase_timeline': self.phase_timeline(),
        }
