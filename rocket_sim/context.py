"""
Rocket Ascent Simulator - Simulation Context

The RocketContext owns the flight state, the current phase and the observer
list. It is the only place flight state is mutated.

Concurrency:
  The periodic clock thread and the command loop both call into the
  context. Every operation runs under a single re-entrant lock, including
  observer fan-out, so each tick's read-modify-write and its notifications
  are delivered as one unit and snapshots reach observers in tick order.
  fast_forward holds the lock across all of its ticks.
"""

import logging
import re
import threading
from typing import Iterable, List, Optional

import numpy as np

from . import constants as C
from .config import SimulationConfig, create_default_config
from .errors import InvalidArgumentError
from .observers import Observer
from .phases import FlightPhase, update_phase
from .state import Snapshot, create_initial_state
from .validation import validate_snapshot, validate_transition

logger = logging.getLogger(__name__)

_TICK_COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_tick_count(value) -> int:
    """
    Convert a fast-forward argument to a non-negative tick count.

    Accepts ints and integer strings ("12", " 3 ", "+4").

    Raises:
        InvalidArgumentError: missing, non-integer or negative value
    """
    if value is None:
        raise InvalidArgumentError("fast_forward <seconds>")
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Invalid tick count: {value!r}")
    if isinstance(value, (int, np.integer)):
        count = int(value)
    elif isinstance(value, str):
        text = value.strip()
        # ASCII decimal only; rejects "1_0" and non-ASCII digits
        if not _TICK_COUNT_PATTERN.fullmatch(text):
            raise InvalidArgumentError(f"Invalid tick count: {value!r}")
        count = int(text)
    else:
        raise InvalidArgumentError(f"Invalid tick count: {value!r}")

    if count < 0:
        raise InvalidArgumentError(f"Tick count must be non-negative: {count}")
    return count


class RocketContext:
    """
    Shared simulation state driven by the clock and the command stream.
    """

    def __init__(self, config: SimulationConfig = None,
                 observers: Optional[Iterable[Observer]] = None):
        self.config = config or create_default_config()
        self._state = create_initial_state(self.config)
        self._observers: List[Observer] = list(observers or [])
        self._lock = threading.RLock()

    # =========================================================================
    # Observers
    # =========================================================================

    def add_observer(self, observer: Observer):
        """Append an observer; duplicates are notified once per registration."""
        with self._lock:
            self._observers.append(observer)

    def remove_observer(self, observer: Observer):
        """Remove the first registration of an observer."""
        with self._lock:
            self._observers.remove(observer)

    @property
    def observers(self) -> List[Observer]:
        with self._lock:
            return list(self._observers)

    def info(self, message: str):
        """Send an informational message to every observer."""
        with self._lock:
            for observer in list(self._observers):
                observer.info(message)

    def error(self, message: str):
        """Send an error message to every observer."""
        with self._lock:
            for observer in list(self._observers):
                observer.error(message)

    def _notify_update(self, snapshot: Snapshot):
        for observer in list(self._observers):
            observer.update(snapshot)

    def _emit(self, level: str, message: str):
        if level == C.LEVEL_ERROR:
            self.error(message)
        else:
            self.info(message)

    # =========================================================================
    # Read accessors
    # =========================================================================

    def snapshot(self) -> Snapshot:
        with self._lock:
            return self._state.snapshot()

    @property
    def phase(self) -> FlightPhase:
        with self._lock:
            return self._state.phase

    @property
    def phase_name(self) -> str:
        return self.phase.display_name

    @property
    def is_terminal(self) -> bool:
        return self.phase.is_terminal

    @property
    def fuel(self) -> int:
        with self._lock:
            return self._state.fuel

    @property
    def altitude(self) -> float:
        with self._lock:
            return self._state.altitude

    @property
    def speed(self) -> float:
        with self._lock:
            return self._state.speed

    @property
    def elapsed_ticks(self) -> int:
        with self._lock:
            return self._state.elapsed_ticks

    # =========================================================================
    # Operations
    # =========================================================================

    def tick(self) -> Snapshot:
        """
        Advance the simulation by one tick.

        Applies the current phase's physics (which may change phase and emit
        messages), increments the tick count, then notifies every observer
        with the new snapshot. Terminal phases still count and notify. With
        validate_snapshots on, a failing check raises ValidationError and
        leaves the state, the tick count and the observers untouched.

        Returns:
            The snapshot delivered to observers.
        """
        with self._lock:
            previous = self._state.snapshot()

            # Work on a copy; nothing is committed or emitted if validation fails
            candidate = self._state.copy()
            result = update_phase(candidate.phase, candidate, self.config)
            candidate.phase = result.phase
            candidate.elapsed_ticks += 1
            snapshot = candidate.snapshot()

            if self.config.validate_snapshots:
                validate_snapshot(snapshot, max_fuel=max(C.MAX_FUEL, self.config.initial_fuel))
                validate_transition(previous, snapshot)

            self._state = candidate
            logger.debug(f"Tick {snapshot.elapsed_ticks}: {self._state}")
            for level, message in result.events:
                self._emit(level, message)

            self._notify_update(snapshot)
            return snapshot

    def fast_forward(self, seconds) -> int:
        """
        Tick up to ``seconds`` times, stopping once a terminal phase is reached.

        Args:
            seconds: Non-negative int, or a string holding one

        Returns:
            Number of ticks actually performed

        Raises:
            InvalidArgumentError: if ``seconds`` is not a non-negative integer
        """
        count = parse_tick_count(seconds)
        performed = 0
        with self._lock:
            for _ in range(count):
                if self._state.phase.is_terminal:
                    break
                self.tick()
                performed += 1
        logger.info(f"Fast-forwarded {performed}/{count} ticks")
        return performed

    def launch(self) -> bool:
        """
        Ignite Stage 1 if still on the pad.

        Returns:
            True if the launch happened, False if already launched.
        """
        with self._lock:
            if self._state.phase != FlightPhase.PRELAUNCH:
                logger.debug(f"Launch ignored in phase {self._state.phase.display_name}")
                return False
            self._state.phase = FlightPhase.STAGE1
            logger.info(f"Launch at t={self._state.elapsed_ticks}")
            self.info(C.MSG_LAUNCH)
            return True

    def checks(self):
        """Report pre-launch checks; does not touch flight state."""
        self.info(C.MSG_CHECKS)
