"""
Rocket Ascent Simulator - Validation Checks

This module implements invariant checks on flight snapshots:
- Fuel within [0, max] and integral
- Altitude and speed finite and non-negative
- Known phase name
- One-directional phase order and monotonic quantities between ticks

Raise on violation.
"""

import numpy as np

from . import constants as C
from .errors import RocketSimError
from .phases import FlightPhase, PHASE_ORDER
from .state import Snapshot


class ValidationError(RocketSimError):
    """Raised when a flight invariant check fails."""
    pass


def check_fuel_valid(fuel: int, max_fuel: int = C.MAX_FUEL) -> bool:
    """
    Check that fuel is an integer percentage within range.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if not isinstance(fuel, (int, np.integer)) or isinstance(fuel, bool):
        raise ValidationError(f"Fuel must be an integer: fuel = {fuel!r}")
    if fuel < 0 or fuel > max_fuel:
        raise ValidationError(
            f"Fuel out of range: fuel = {fuel}%, allowed = [0, {max_fuel}]"
        )
    return True


def check_quantity_valid(name: str, value: float) -> bool:
    """
    Check that a physical quantity is finite and non-negative.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    if not np.isfinite(value):
        raise ValidationError(f"Non-finite {name}: {value}")
    if value < 0.0:
        raise ValidationError(f"Negative {name}: {value}")
    return True


def validate_snapshot(snapshot: Snapshot, max_fuel: int = C.MAX_FUEL) -> bool:
    """
    Run all single-snapshot checks.

    Args:
        snapshot: Snapshot to check
        max_fuel: Upper fuel bound (the configured initial load)

    Returns:
        True if all checks pass, raises ValidationError otherwise
    """
    check_fuel_valid(snapshot.fuel, max_fuel)
    check_quantity_valid("altitude", snapshot.altitude)
    check_quantity_valid("speed", snapshot.speed)
    if snapshot.elapsed_ticks < 0:
        raise ValidationError(f"Negative tick count: {snapshot.elapsed_ticks}")
    try:
        FlightPhase.from_display_name(snapshot.phase)
    except ValueError as e:
        raise ValidationError(str(e)) from e
    return True


def validate_transition(previous: Snapshot, current: Snapshot) -> bool:
    """
    Check consistency between two consecutive snapshots.

    Phases only move forward, a terminal phase is never left, fuel never
    increases, and altitude and speed never decrease.

    Returns:
        True if valid, raises ValidationError otherwise
    """
    prev_phase = FlightPhase.from_display_name(previous.phase)
    curr_phase = FlightPhase.from_display_name(current.phase)

    if PHASE_ORDER[curr_phase] < PHASE_ORDER[prev_phase]:
        raise ValidationError(
            f"Phase moved backwards: {previous.phase} -> {current.phase}"
        )
    if prev_phase.is_terminal and curr_phase != prev_phase:
        raise ValidationError(
            f"Left terminal phase: {previous.phase} -> {current.phase}"
        )
    if current.fuel > previous.fuel:
        raise ValidationError(
            f"Fuel increased: {previous.fuel}% -> {current.fuel}%"
        )
    if current.altitude < previous.altitude or current.speed < previous.speed:
        raise ValidationError(
            f"Altitude/speed decreased: "
            f"alt {previous.altitude:.1f} -> {current.altitude:.1f}km, "
            f"v {previous.speed:.0f} -> {current.speed:.0f}km/h"
        )
    if current.elapsed_ticks < previous.elapsed_ticks:
        raise ValidationError(
            f"Tick count decreased: {previous.elapsed_ticks} -> {current.elapsed_ticks}"
        )
    return True
