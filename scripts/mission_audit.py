"""
Mission audit report: nominal flight breakdown plus an initial-fuel sweep.
"""

from __future__ import annotations

import argparse
import dataclasses
from collections import OrderedDict
from pathlib import Path
import sys

import numpy as np

if __package__ in (None, ""):
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from rocket_sim import RocketContext, TelemetryRecorder
from rocket_sim.config import create_default_config, SimulationConfig


def _phase_fuel_usage(phases, fuel, initial_fuel):
    """Fuel burned in each phase, in order of first appearance."""
    usage = OrderedDict()
    prev_fuel = initial_fuel
    for p, f in zip(phases, fuel):
        usage[p] = usage.get(p, 0) + (prev_fuel - f)
        prev_fuel = f
    return usage


def fly(config: SimulationConfig, max_ticks: int = 10_000) -> TelemetryRecorder:
    """Launch immediately and fly until a terminal phase (or max_ticks)."""
    recorder = TelemetryRecorder()
    rocket = RocketContext(config, observers=[recorder])
    rocket.launch()
    rocket.fast_forward(max_ticks)
    return recorder


def fuel_sweep(fuel_levels, base: SimulationConfig = None):
    """Fly once per initial fuel level; return (fuel, outcome, ticks, altitude) rows."""
    base = base or create_default_config()
    rows = []
    for level in fuel_levels:
        cfg = dataclasses.replace(base, initial_fuel=int(level))
        summary = fly(cfg).summary()
        rows.append((int(level), summary['final_phase'], summary['ticks'],
                     summary['peak_altitude']))
    return rows


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run a nominal flight and an initial-fuel sweep.")
    parser.add_argument("--min-fuel", type=int, default=10, help="Lowest initial fuel in the sweep (%%)")
    parser.add_argument("--max-fuel", type=int, default=100, help="Highest initial fuel in the sweep (%%)")
    parser.add_argument("--step", type=int, default=10, help="Sweep step (%%)")
    args = parser.parse_args(argv)

    cfg = create_default_config()
    recorder = fly(cfg)
    summary = recorder.summary()

    print("=" * 72)
    print("ROCKET MISSION AUDIT")
    print("=" * 72)
    print(f"Outcome:        {summary['final_phase']}")
    print(f"Ticks flown:    {summary['ticks']}")
    print(f"Peak altitude:  {summary['peak_altitude']:.1f} km")
    print(f"Peak speed:     {summary['peak_speed']:.0f} km/h")
    print("-" * 72)
    print("Phase Transitions:")
    data = recorder.as_arrays()
    for tick, phase in summary['phase_timeline']:
        i = int(np.searchsorted(data['tick'], tick))
        print(f"  t={tick:5d} | {phase:10s} | fuel={data['fuel'][i]:3d}% | "
              f"alt={data['altitude'][i]:7.1f} km")
    print("-" * 72)
    print("Fuel Usage by Phase:")
    for phase, burned in _phase_fuel_usage(recorder.phase, recorder.fuel, cfg.initial_fuel).items():
        print(f"  {phase:10s} : {burned:3d}%")
    print("-" * 72)
    print("Initial Fuel Sweep:")
    levels = np.arange(args.min_fuel, args.max_fuel + 1, args.step)
    for level, outcome, ticks, altitude in fuel_sweep(levels, cfg):
        print(f"  fuel={level:3d}% -> {outcome:8s} after {ticks:3d} ticks, alt={altitude:6.1f} km")
    print("=" * 72)


if __name__ == "__main__":
    main()
