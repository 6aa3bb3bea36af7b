"""
Tests for the periodic telemetry ticker.
"""

import threading

import pytest

from astromind.core.exceptions import OperationError, TickerError
from astromind.core.telemetry_engine import TelemetryEngine
from astromind.core.telemetry_ticker import TelemetryTicker


@pytest.fixture
def ticker(fixed_clock):
    engine = TelemetryEngine(seed=10, clock=fixed_clock)
    ticker = TelemetryTicker(engine, interval=0.01)
    yield ticker
    ticker.stop(timeout=2.0)


class TestTickerLifecycle:
    def test_background_ticks_reach_callback(self, ticker):
        received = []
        done = threading.Event()

        def on_tick(snapshot):
            received.append(snapshot)
            if len(received) >= 3:
                done.set()

        assert ticker.start(on_tick)
        assert done.wait(timeout=5.0)
        ticker.stop(timeout=2.0)

        assert not ticker.is_running
        assert ticker.engine.tick_count >= 3
        assert ticker.last_error is None

    def test_second_start_is_noop(self, ticker):
        assert ticker.start(lambda s: None)
        first_thread = ticker._thread
        assert not ticker.start(lambda s: None)
        assert ticker._thread is first_thread

    def test_stop_is_idempotent(self, ticker):
        ticker.stop()
        ticker.start(lambda s: None)
        ticker.stop(timeout=2.0)
        ticker.stop(timeout=2.0)
        assert not ticker.is_running

    def test_restart_after_stop(self, ticker):
        ticker.start(lambda s: None)
        ticker.stop(timeout=2.0)
        assert ticker.start(lambda s: None)
        assert ticker.is_running

    def test_context_manager_stops(self, fixed_clock):
        engine = TelemetryEngine(seed=1, clock=fixed_clock)
        with TelemetryTicker(engine, interval=0.01) as ticker:
            ticker.start(lambda s: None)
            assert ticker.is_running
        assert not ticker.is_running

    def test_callback_failure_halts_ticker(self, ticker):
        failed = threading.Event()

        def on_tick(snapshot):
            failed.set()
            raise ValueError("display gone")

        ticker.start(on_tick)
        assert failed.wait(timeout=5.0)
        ticker._thread.join(timeout=2.0)

        assert not ticker.is_running
        assert isinstance(ticker.last_error, OperationError)
        assert isinstance(ticker.last_error.original_exc, ValueError)
        assert ticker.engine.tick_count == 1


class TestTickerValidation:
    @pytest.mark.parametrize("interval", [0, -1.0, float("inf"), float("nan")])
    def test_invalid_interval(self, fixed_clock, interval):
        engine = TelemetryEngine(seed=1, clock=fixed_clock)
        with pytest.raises(TickerError):
            TelemetryTicker(engine, interval=interval)

    def test_start_with_invalid_interval(self, ticker):
        with pytest.raises(TickerError):
            ticker.start(lambda s: None, interval=0)
        assert not ticker.is_running


class TestRunTicks:
    def test_synchronous_ticks(self, ticker):
        seen = []
        snapshots = ticker.run_ticks(4, seen.append)
        assert len(snapshots) == 4
        assert seen == snapshots
        assert ticker.engine.tick_count == 4

    def test_zero_ticks(self, ticker):
        assert ticker.run_ticks(0) == []

    def test_negative_count(self, ticker):
        with pytest.raises(TickerError):
            ticker.run_ticks(-1)

    def test_refused_while_running(self, ticker):
        ticker.start(lambda s: None)
        with pytest.raises(TickerError):
            ticker.run_ticks(1)
