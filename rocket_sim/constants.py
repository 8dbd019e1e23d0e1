"""
Rocket Ascent Simulator - Constants and Vehicle Parameters

This module defines the initial conditions, per-stage physics deltas,
staging thresholds, operator messages and clock settings used throughout
the simulator.
"""

# =============================================================================
# INITIAL CONDITIONS
# =============================================================================

# Fuel is tracked as an integer percentage of a full load
INITIAL_FUEL = 100
MAX_FUEL = 100

# Altitude (km) and speed (km/h) on the pad
INITIAL_ALTITUDE = 0.0
INITIAL_SPEED = 0.0

# =============================================================================
# STAGE 1 (per tick)
# =============================================================================

STAGE1_FUEL_BURN = 2
STAGE1_ALTITUDE_GAIN = 10.0
STAGE1_SPEED_GAIN = 1000.0

# Staging: separate when fuel drops to this level OR altitude reaches this
STAGE1_FUEL_CUTOFF = 40
STAGE1_ALTITUDE_CUTOFF = 120.0

# =============================================================================
# STAGE 2 (per tick)
# =============================================================================

STAGE2_FUEL_BURN = 1
STAGE2_ALTITUDE_GAIN = 5.0
STAGE2_SPEED_GAIN = 400.0

# Mission fails at or below this fuel level
STAGE2_FUEL_RESERVE = 5

# Orbit is declared at or above this altitude
ORBIT_ALTITUDE = 400.0

# =============================================================================
# CLOCK
# =============================================================================

# Seconds of wall time per simulated tick
TICK_INTERVAL = 1.0

# Seconds to wait for the clock thread on shutdown
CLOCK_JOIN_TIMEOUT = 1.0

# =============================================================================
# OPERATOR MESSAGES
# =============================================================================

MSG_CHECKS = "All systems are 'Go' for launch."
MSG_LAUNCH = "Launch initiated."
MSG_STAGE_SEPARATION = "Stage 1 complete. Separating stage. Entering Stage 2."
MSG_MISSION_FAILED = "Mission Failed due to insufficient fuel."
MSG_ORBIT_ACHIEVED = "Orbit achieved! Mission Successful."

# Notification levels carried by phase events
LEVEL_INFO = "info"
LEVEL_ERROR = "error"
