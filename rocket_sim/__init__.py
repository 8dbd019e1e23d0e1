"""
Rocket Ascent Simulator Package

A discrete-time rocket ascent simulator driven by a periodic clock and an
interactive command stream, observed by any number of listeners.

Modules:
    - constants: Initial conditions, stage physics and messages
    - config: Immutable simulation configuration
    - phases: Flight phase state machine
    - state: Flight state and snapshots
    - observers: Observer base and console/logging/telemetry sinks
    - context: Shared simulation context (thread-safe)
    - commands: Command router and default command set
    - clock: Background clock driver
    - validation: Flight invariant checks
    - plotting: Telemetry plots
    - cli: Interactive console entry point
"""

from .phases import FlightPhase
from .state import FlightState, Snapshot, create_initial_state
from .observers import Observer, ConsoleObserver, LoggingObserver, TelemetryRecorder
from .context import RocketContext
from .commands import CommandRouter, create_default_router
from .clock import ClockDriver
from .config import SimulationConfig, create_default_config, create_test_config
from .errors import RocketSimError, CommandError, InvalidArgumentError, UnknownCommandError

__version__ = "1.0.0"
__author__ = "Rocket Simulation Team"

__all__ = [
    'FlightPhase',
    'FlightState',
    'Snapshot',
    'create_initial_state',
    'Observer',
    'ConsoleObserver',
    'LoggingObserver',
    'TelemetryRecorder',
    'RocketContext',
    'CommandRouter',
    'create_default_router',
    'ClockDriver',
    'SimulationConfig',
    'create_default_config',
    'create_test_config',
    'RocketSimError',
    'CommandError',
    'InvalidArgumentError',
    'UnknownCommandError',
]
