"""
Rocket Ascent Simulator - Clock Driver

Background thread that ticks a RocketContext at a fixed rate, independently
of the command loop. The first tick fires one interval after start().
"""

import logging
import threading
import time
from typing import Optional

from . import constants as C
from .context import RocketContext

logger = logging.getLogger(__name__)


class ClockDriver:
    """
    Fixed-rate periodic tick source.

    Args:
        context: Context to tick
        interval: Seconds between ticks (defaults to config.tick_interval)
    """

    def __init__(self, context: RocketContext, interval: Optional[float] = None):
        self.context = context
        self.interval = context.config.tick_interval if interval is None else interval
        if self.interval <= 0:
            raise ValueError(f"Clock interval must be positive: {self.interval}")
        self.ticks_fired = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return (self._thread is not None and self._thread.is_alive()
                and not self._stop_event.is_set())

    def start(self):
        """Start the clock thread (no-op if already running)."""
        if self.running:
            return
        # A thread that outlived stop() must finish before a new one starts
        self._join_previous()
        # Fresh event per run; setting or clearing it never reaches an old loop
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            args=(self._stop_event,),
            name="rocket-clock",
            daemon=True,
        )
        self._thread.start()
        logger.info(f"Clock started: interval={self.interval}s")

    def stop(self, timeout: float = C.CLOCK_JOIN_TIMEOUT):
        """Stop the clock thread and wait up to ``timeout`` for it to exit."""
        self._stop_event.set()
        thread = self._thread
        if thread is None:
            return
        if thread is not threading.current_thread():
            thread.join(timeout=timeout)
        if thread.is_alive():
            logger.warning(f"Clock thread still finishing a tick after {timeout}s")
            return
        self._thread = None
        logger.info(f"Clock stopped after {self.ticks_fired} ticks")

    def _join_previous(self):
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def _run(self, stop_event: threading.Event):
        next_tick = time.monotonic() + self.interval
        while not stop_event.wait(max(0.0, next_tick - time.monotonic())):
            try:
                self.context.tick()
            except Exception as e:
                logger.error(f"Clock tick failed: {e}", exc_info=True)
            self.ticks_fired += 1
            next_tick += self.interval

    def __enter__(self) -> 'ClockDriver':
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False
