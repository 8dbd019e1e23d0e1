"""
Rocket Ascent Simulator - Configuration

This module provides a SimulationConfig dataclass for dependency injection,
allowing different initial conditions, staging thresholds and clock rates
to be passed without modifying global constants.

Defaults reproduce the reference flight profile exactly.
"""

from dataclasses import dataclass

from . import constants as C


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for simulation parameters.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.

    Section grouping:
      1. Initial conditions
      2. Stage 1 physics
      3. Stage 2 physics
      4. Clock
      5. Diagnostics
    """

    # ── 1. Initial conditions ────────────────────────────────────────────
    initial_fuel: int = C.INITIAL_FUEL
    initial_altitude: float = C.INITIAL_ALTITUDE
    initial_speed: float = C.INITIAL_SPEED

    # ── 2. Stage 1 physics ───────────────────────────────────────────────
    stage1_fuel_burn: int = C.STAGE1_FUEL_BURN
    stage1_altitude_gain: float = C.STAGE1_ALTITUDE_GAIN
    stage1_speed_gain: float = C.STAGE1_SPEED_GAIN
    stage1_fuel_cutoff: int = C.STAGE1_FUEL_CUTOFF
    stage1_altitude_cutoff: float = C.STAGE1_ALTITUDE_CUTOFF

    # ── 3. Stage 2 physics ───────────────────────────────────────────────
    stage2_fuel_burn: int = C.STAGE2_FUEL_BURN
    stage2_altitude_gain: float = C.STAGE2_ALTITUDE_GAIN
    stage2_speed_gain: float = C.STAGE2_SPEED_GAIN
    stage2_fuel_reserve: int = C.STAGE2_FUEL_RESERVE
    orbit_altitude: float = C.ORBIT_ALTITUDE

    # ── 4. Clock ─────────────────────────────────────────────────────────
    tick_interval: float = C.TICK_INTERVAL

    # ── 5. Diagnostics ───────────────────────────────────────────────────
    # Run invariant checks on every tick (raises ValidationError)
    validate_snapshots: bool = False


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_test_config(tick_interval: float = 0.01,
                       **overrides) -> SimulationConfig:
    """Create a fast config suitable for testing.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    """
    defaults = dict(tick_interval=tick_interval, validate_snapshots=True)
    defaults.update(overrides)
    return SimulationConfig(**defaults)
