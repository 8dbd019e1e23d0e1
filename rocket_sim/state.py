"""
Rocket Ascent Simulator - Flight State

This module defines the single mutable state record owned by the simulation
context, and the immutable Snapshot handed to observers. No duplicated state
is allowed anywhere: phases mutate the FlightState they are given, and every
reader goes through a Snapshot.
"""

from dataclasses import dataclass

from .config import SimulationConfig, create_default_config
from .phases import FlightPhase


@dataclass(frozen=True)
class Snapshot:
    """
    Immutable read of the flight state at one point in time.

    Attributes:
        phase: Display name of the current phase ("Stage 1", "Orbit", ...)
        fuel: Remaining fuel (integer percent)
        altitude: Altitude (km)
        speed: Speed (km/h)
        elapsed_ticks: Ticks completed since the context was created
    """
    phase: str
    fuel: int
    altitude: float
    speed: float
    elapsed_ticks: int

    def __str__(self) -> str:
        return (
            f"Stage: {self.phase}, Fuel: {self.fuel}%, "
            f"Altitude: {self.altitude:.1f} km, Speed: {self.speed:.0f} km/h"
        )


@dataclass
class FlightState:
    """
    Mutable flight quantities.

    Attributes:
        phase: Current flight phase
        fuel: Remaining fuel (integer percent, never negative)
        altitude: Altitude (km, never negative)
        speed: Speed (km/h, never negative)
        elapsed_ticks: Ticks completed
    """
    phase: FlightPhase = FlightPhase.PRELAUNCH
    fuel: int = 0
    altitude: float = 0.0
    speed: float = 0.0
    elapsed_ticks: int = 0

    def consume_fuel(self, amount: int):
        """Burn fuel, flooring at zero."""
        self.fuel = max(0, self.fuel - amount)

    def climb(self, altitude_gain: float, speed_gain: float):
        """Accumulate altitude and speed."""
        self.altitude += altitude_gain
        self.speed += speed_gain

    def snapshot(self) -> Snapshot:
        return Snapshot(
            phase=self.phase.display_name,
            fuel=self.fuel,
            altitude=self.altitude,
            speed=self.speed,
            elapsed_ticks=self.elapsed_ticks,
        )

    def copy(self) -> 'FlightState':
        return FlightState(
            phase=self.phase,
            fuel=self.fuel,
            altitude=self.altitude,
            speed=self.speed,
            elapsed_ticks=self.elapsed_ticks,
        )

    def __str__(self) -> str:
        return (
            f"FlightState(phase={self.phase.display_name}, t={self.elapsed_ticks}, "
            f"fuel={self.fuel}%, alt={self.altitude:.1f}km, "
            f"v={self.speed:.0f}km/h)"
        )


def create_initial_state(config: SimulationConfig = None) -> FlightState:
    """
    Create the on-pad state for a new flight.

    Args:
        config: Simulation configuration (defaults to reference values)

    Returns:
        FlightState in PRELAUNCH with full fuel.
    """
    config = config or create_default_config()
    return FlightState(
        phase=FlightPhase.PRELAUNCH,
        fuel=int(config.initial_fuel),
        altitude=float(config.initial_altitude),
        speed=float(config.initial_speed),
        elapsed_ticks=0,
    )
