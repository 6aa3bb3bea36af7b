"""
Telemetry Ticker

External periodic trigger for a TelemetryEngine. Calls ``tick()`` every
``interval`` seconds on one background thread and hands each snapshot
to an observer callback.

Only one timer is active at a time: starting a running ticker is a
no-op and stopping is idempotent. Ticks never overlap because they run
on a single thread and the engine serializes mutation under its lock.

Usage:
    engine = TelemetryEngine(seed=7)
    with TelemetryTicker(engine, interval=2.0) as ticker:
        ticker.start(display.update)
        ...
"""

import logging
import math
import threading
from typing import Callable, List, Optional

from .error_handling import error_context
from .exceptions import AstroMindException, TickerError, format_exception_message
from .telemetry import Telemetry
from .telemetry_engine import TelemetryEngine

logger = logging.getLogger(__name__)

TelemetryCallback = Callable[[Telemetry], None]


class TelemetryTicker:
    """Drive a TelemetryEngine on a fixed cadence."""

    def __init__(self, engine: TelemetryEngine, interval: float = 2.0):
        self.engine = engine
        self.interval = self._validate_interval(interval)
        self._callback: Optional[TelemetryCallback] = None
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._state_lock = threading.Lock()
        self.last_error: Optional[AstroMindException] = None

    @staticmethod
    def _validate_interval(interval: float) -> float:
        interval = float(interval)
        if not math.isfinite(interval) or interval <= 0:
            raise TickerError(f"interval must be a positive finite number, got {interval}")
        return interval

    @property
    def is_running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive() and not self._stop_event.is_set()

    def start(self, callback: TelemetryCallback, interval: Optional[float] = None) -> bool:
        """
        Start ticking.

        Args:
            callback: Observer receiving one snapshot per tick
            interval: Optional new cadence in seconds

        Returns:
            True if a timer was started, False if one was already running
        """
        with self._state_lock:
            if self.is_running:
                logger.debug("Ticker already running; start ignored")
                return False
            if interval is not None:
                self.interval = self._validate_interval(interval)
            self._callback = callback
            self.last_error = None
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run,
                args=(self._stop_event,),
                name="telemetry-ticker",
                daemon=True,
            )
            self._thread.start()
            logger.info("Telemetry ticker started (interval %.2fs)", self.interval)
            return True

    def stop(self, timeout: Optional[float] = None) -> None:
        """Cancel the trigger and wait for an in-flight tick to finish."""
        with self._state_lock:
            thread = self._thread
            if thread is None:
                return
            self._stop_event.set()
            if thread is not threading.current_thread():
                thread.join(timeout)
            self._thread = None
            logger.info("Telemetry ticker stopped after %d ticks", self.engine.tick_count)

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            try:
                self._tick_once()
            except AstroMindException as exc:
                self.last_error = exc
                logger.error("Telemetry ticker halted: %s", format_exception_message(exc))
                stop_event.set()
                return

    def _tick_once(self) -> Telemetry:
        with error_context("Telemetry tick"):
            snapshot = self.engine.tick()
            if self._callback is not None:
                self._callback(snapshot)
        return snapshot

    def run_ticks(self, count: int, callback: Optional[TelemetryCallback] = None) -> List[Telemetry]:
        """
        Run ``count`` ticks synchronously on the calling thread.

        Refuses to run while the background timer is active.

        Returns:
            Snapshots in tick order
        """
        if count < 0:
            raise TickerError(f"tick count must be non-negative, got {count}")
        if self.is_running:
            raise TickerError("cannot run ticks synchronously while the timer is running")
        snapshots = []
        for _ in range(count):
            snapshot = self.engine.tick()
            if callback is not None:
                callback(snapshot)
            snapshots.append(snapshot)
        return snapshots

    def __enter__(self) -> "TelemetryTicker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
