"""
Rocket Ascent Simulator - Telemetry Plots

Renders recorded telemetry (altitude, speed, fuel against tick) to PNG files,
with a dashed marker at every phase change.
"""

from pathlib import Path
from typing import List

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np

from .observers import TelemetryRecorder


# (channel, y-label, title, file name)
PLOT_CHANNELS = [
    ('altitude', 'Altitude (km)', 'Altitude vs Time', 'altitude.png'),
    ('speed', 'Speed (km/h)', 'Speed vs Time', 'speed.png'),
    ('fuel', 'Fuel (%)', 'Fuel vs Time', 'fuel.png'),
]


def _mark_phase_changes(ax, timeline):
    for tick, phase in timeline[1:]:
        ax.axvline(tick, color='gray', linestyle='--', linewidth=0.8)
        ax.annotate(phase, xy=(tick, 1.0), xycoords=('data', 'axes fraction'),
                    xytext=(3, -12), textcoords='offset points', fontsize=8)


def plot_telemetry(recorder: TelemetryRecorder, output_dir) -> List[str]:
    """
    Write one PNG per telemetry channel.

    Args:
        recorder: Recorder holding at least one snapshot
        output_dir: Directory to write into (created if missing)

    Returns:
        Paths of the written files.
    """
    if len(recorder) == 0:
        raise ValueError("No telemetry recorded")

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    data = recorder.as_arrays()
    timeline = recorder.phase_timeline()
    paths = []

    for channel, ylabel, title, filename in PLOT_CHANNELS:
        fig, ax = plt.subplots(figsize=(8, 4.5))
        try:
            ax.plot(data['tick'], data[channel], linewidth=1.5)
            _mark_phase_changes(ax, timeline)
            ax.set_xlabel('Time (ticks)')
            ax.set_ylabel(ylabel)
            ax.set_title(title)
            ax.set_xlim(left=0, right=max(1, int(np.max(data['tick']))))
            ax.grid(True, alpha=0.3)
            fig.tight_layout()
            path = out / filename
            fig.savefig(path, dpi=100)
            paths.append(str(path))
        finally:
            plt.close(fig)

    return paths
