"""
Rocket Ascent Simulator - Flight Phases

This module handles the state machine for the flight. It defines the discrete
flight phases, the per-tick physics each phase applies, and the transition
logic between them.

Transitions are one-directional:
  - PRELAUNCH -> STAGE1:  operator launch command only (never by update)
  - STAGE1    -> STAGE2:  fuel <= cutoff OR altitude >= cutoff
  - STAGE2    -> FAILED:  fuel <= reserve
  - STAGE2    -> ORBIT:   altitude >= orbit altitude
  - ORBIT, FAILED:        terminal, no physics

The two STAGE2 checks are evaluated in that fixed order on the same tick, so
when both hold the orbit check overrides the failure (both events are still
emitted, error first).
"""

from enum import Enum, auto
import logging
from typing import TYPE_CHECKING, List, NamedTuple, Tuple

from . import constants as C

if TYPE_CHECKING:
    from .config import SimulationConfig
    from .state import FlightState

logger = logging.getLogger(__name__)


class FlightPhase(Enum):
    PRELAUNCH = auto()
    STAGE1 = auto()
    STAGE2 = auto()
    ORBIT = auto()          # Terminal: mission successful
    FAILED = auto()         # Terminal: fuel exhausted in Stage 2

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def is_terminal(self) -> bool:
        return self in (FlightPhase.ORBIT, FlightPhase.FAILED)

    @classmethod
    def from_display_name(cls, name: str) -> 'FlightPhase':
        for phase, label in _DISPLAY_NAMES.items():
            if label == name:
                return phase
        raise ValueError(f"Unknown flight phase: {name!r}")


_DISPLAY_NAMES = {
    FlightPhase.PRELAUNCH: "Pre-Launch",
    FlightPhase.STAGE1: "Stage 1",
    FlightPhase.STAGE2: "Stage 2",
    FlightPhase.ORBIT: "Orbit",
    FlightPhase.FAILED: "Failed",
}

# Phase order used to enforce one-directional transitions
PHASE_ORDER = {
    FlightPhase.PRELAUNCH: 0,
    FlightPhase.STAGE1: 1,
    FlightPhase.STAGE2: 2,
    FlightPhase.ORBIT: 3,
    FlightPhase.FAILED: 3,
}


class PhaseUpdate(NamedTuple):
    """Result of one tick of phase logic."""
    phase: FlightPhase
    events: List[Tuple[str, str]]  # (level, message) in emission order


def _update_stage1(state: 'FlightState', config: 'SimulationConfig') -> PhaseUpdate:
    state.consume_fuel(config.stage1_fuel_burn)
    state.climb(config.stage1_altitude_gain, config.stage1_speed_gain)

    if (state.fuel <= config.stage1_fuel_cutoff or
            state.altitude >= config.stage1_altitude_cutoff):
        logger.info(f"Stage separation at t={state.elapsed_ticks + 1}, "
                    f"fuel={state.fuel}%, alt={state.altitude:.1f}km")
        return PhaseUpdate(FlightPhase.STAGE2,
                           [(C.LEVEL_INFO, C.MSG_STAGE_SEPARATION)])
    return PhaseUpdate(FlightPhase.STAGE1, [])


def _update_stage2(state: 'FlightState', config: 'SimulationConfig') -> PhaseUpdate:
    state.consume_fuel(config.stage2_fuel_burn)
    state.climb(config.stage2_altitude_gain, config.stage2_speed_gain)

    next_phase = FlightPhase.STAGE2
    events = []

    if state.fuel <= config.stage2_fuel_reserve:
        logger.error(f"Fuel exhausted at t={state.elapsed_ticks + 1}, "
                     f"fuel={state.fuel}%, alt={state.altitude:.1f}km")
        next_phase = FlightPhase.FAILED
        events.append((C.LEVEL_ERROR, C.MSG_MISSION_FAILED))

    # Evaluated regardless of the fuel check; a simultaneous orbit wins.
    if state.altitude >= config.orbit_altitude:
        logger.info(f"Orbit achieved at t={state.elapsed_ticks + 1}, "
                    f"fuel={state.fuel}%, alt={state.altitude:.1f}km, "
                    f"v={state.speed:.0f}km/h")
        next_phase = FlightPhase.ORBIT
        events.append((C.LEVEL_INFO, C.MSG_ORBIT_ACHIEVED))

    return PhaseUpdate(next_phase, events)


def update_phase(phase: FlightPhase, state: 'FlightState',
                 config: 'SimulationConfig') -> PhaseUpdate:
    """
    Apply one tick of physics for the given phase and decide the next phase.

    Mutates fuel, altitude and speed on ``state``; does not touch
    ``state.phase`` or ``state.elapsed_ticks`` (the caller owns those).

    Args:
        phase: Phase whose update rule applies this tick
        state: Flight state to advance
        config: Simulation configuration

    Returns:
        PhaseUpdate with the next phase and the notifications to emit.
    """
    if phase == FlightPhase.STAGE1:
        return _update_stage1(state, config)
    elif phase == FlightPhase.STAGE2:
        return _update_stage2(state, config)
    # PRELAUNCH waits for launch; ORBIT and FAILED are terminal
    return PhaseUpdate(phase, [])
