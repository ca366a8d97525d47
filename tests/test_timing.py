"""
Tests for the timing package: debounce, throttle, once and async helpers.
"""

import asyncio
import gc
import logging
import threading
import time

import pytest

from utilkit.core import OperationTimeoutError, RetryOptions, CatchResult
from utilkit.timing import (
    Debounced, Throttled, debounce, throttle, once, noop,
    sleep, retry, retry_sync, timeout, catch_error
)
from utilkit.timing import promise as promise_module


class TestDebounce:
    """Test debounce wrappers."""

    @pytest.mark.asyncio
    async def test_delivers_only_last_call(self):
        """Test a burst of calls produces one call with the last arguments."""
        calls = []
        debounced = debounce(lambda *args: calls.append(args), 30)

        for i in range(5):
            debounced(i)

        assert isinstance(debounced, Debounced)
        assert debounced.pending is True
        assert calls == []

        await asyncio.sleep(0.1)

        assert calls == [(4,)]
        assert debounced.pending is False

    @pytest.mark.asyncio
    async def test_resets_timer_on_each_call(self):
        """Test each call pushes the deadline back."""
        calls = []
        debounced = debounce(calls.append, 40)

        debounced("a")
        await asyncio.sleep(0.025)
        debounced("b")
        await asyncio.sleep(0.025)

        assert calls == []

        await asyncio.sleep(0.06)
        assert calls == ["b"]

    @pytest.mark.asyncio
    async def test_passes_keyword_arguments(self):
        """Test keyword arguments reach the wrapped function."""
        calls = []

        def record(value, scale=1):
            calls.append(value * scale)

        debounced = debounce(record, 10)
        debounced(2, scale=3)
        await asyncio.sleep(0.05)

        assert calls == [6]

    @pytest.mark.asyncio
    async def test_cancel(self):
        """Test cancel discards the pending call and is idempotent."""
        calls = []
        debounced = debounce(calls.append, 20)

        debounced(1)
        debounced.cancel()
        debounced.cancel()
        await asyncio.sleep(0.06)

        assert calls == []
        assert debounced.pending is False

    @pytest.mark.asyncio
    async def test_coroutine_function(self):
        """Test coroutine functions run as tasks on the loop."""
        calls = []

        async def record(value):
            calls.append(value)

        debounced = debounce(record, 10)
        debounced("x")
        await asyncio.sleep(0.06)

        assert calls == ["x"]

    @pytest.mark.asyncio
    async def test_coroutine_task_is_held_until_done(self):
        """Test running coroutine tasks are tracked and released when they finish."""
        calls = []

        async def slow(value):
            await asyncio.sleep(0.05)
            calls.append(value)

        debounced = debounce(slow, 5)
        debounced("y")
        await asyncio.sleep(0.02)
        gc.collect()

        assert len(debounced._tasks) == 1

        await asyncio.sleep(0.08)

        assert calls == ["y"]
        assert debounced._tasks == set()

    @pytest.mark.asyncio
    async def test_failing_coroutine_is_logged(self, caplog):
        """Test a failing coroutine is logged instead of left unretrieved."""
        loop = asyncio.get_running_loop()
        unhandled = []
        loop.set_exception_handler(lambda _loop, context: unhandled.append(context["message"]))

        async def fail(value):
            raise RuntimeError(f"bad {value}")

        debounced = debounce(fail, 5)
        try:
            with caplog.at_level(logging.ERROR, logger="utilkit.timing.function"):
                debounced("x")
                await asyncio.sleep(0.05)
                gc.collect()
        finally:
            loop.set_exception_handler(None)

        assert unhandled == []
        assert debounced._tasks == set()
        assert "Scheduled call to fail failed: bad x" in caplog.text

    def test_without_event_loop(self):
        """Test thread timers are used when no loop is running."""
        calls = []
        fired = threading.Event()

        def record(value):
            calls.append(value)
            fired.set()

        debounced = debounce(record, 20)
        debounced(1)
        debounced(2)

        assert fired.wait(1.0)
        time.sleep(0.05)
        assert calls == [2]
        assert debounced.pending is False

    def test_preserves_metadata(self):
        """Test the wrapper keeps the wrapped function's name."""
        def handler():
            """Handle things."""

        debounced = debounce(handler, 10)

        assert debounced.__name__ == "handler"
        assert debounced.__doc__ == "Handle things."


class TestThrottle:
    """Test throttle wrappers."""

    @pytest.mark.asyncio
    async def test_leading_and_trailing_calls(self):
        """Test two instant calls give one immediate and one trailing call."""
        calls = []
        throttled = throttle(calls.append, 30)

        throttled("a")
        throttled("b")

        assert isinstance(throttled, Throttled)
        assert calls == ["a"]
        assert throttled.pending is True

        await asyncio.sleep(0.1)

        assert calls == ["a", "b"]
        assert throttled.pending is False

    @pytest.mark.asyncio
    async def test_trailing_call_uses_latest_arguments(self):
        """Test suppressed calls collapse into the most recent one."""
        calls = []
        throttled = throttle(calls.append, 30)

        for i in range(5):
            throttled(i)
        await asyncio.sleep(0.1)

        assert calls == [0, 4]

    @pytest.mark.asyncio
    async def test_runs_immediately_after_interval(self):
        """Test a call after the interval is not delayed."""
        calls = []
        throttled = throttle(calls.append, 20)

        throttled(1)
        await asyncio.sleep(0.05)
        throttled(2)

        assert calls == [1, 2]
        assert throttled.pending is False

    @pytest.mark.asyncio
    async def test_cancel_drops_trailing_call(self):
        """Test cancel prevents the trailing call."""
        calls = []
        throttled = throttle(calls.append, 20)

        throttled(1)
        throttled(2)
        throttled.cancel()
        await asyncio.sleep(0.06)

        assert calls == [1]

    def test_cancel_with_nothing_pending(self):
        """Test cancel is safe before any call."""
        throttled = throttle(noop, 20)

        throttled.cancel()

        assert throttled.pending is False

    def test_without_event_loop(self):
        """Test the trailing call fires from a thread timer."""
        calls = []
        fired = threading.Event()

        def record(value):
            calls.append(value)
            if len(calls) == 2:
                fired.set()

        throttled = throttle(record, 20)
        throttled("first")
        throttled("second")

        assert calls == ["first"]
        assert fired.wait(1.0)
        assert calls == ["first", "second"]


class TestOnce:
    """Test once and noop."""

    def test_calls_only_once(self):
        """Test the function runs a single time."""
        counter = {'calls': 0}

        def increment(step):
            counter['calls'] += step
            return counter['calls']

        wrapped = once(increment)

        assert wrapped(1) == 1
        assert wrapped(5) == 1
        assert counter['calls'] == 1

    def test_caches_falsy_results(self):
        """Test falsy first results are cached too."""
        calls = []

        def zero():
            calls.append(1)
            return 0

        wrapped = once(zero)

        assert wrapped() == 0
        assert wrapped() == 0
        assert len(calls) == 1

    def test_raising_function_runs_once(self):
        """Test a function that raises is not run a second time."""
        calls = []

        def explode():
            calls.append(1)
            raise ValueError("boom")

        wrapped = once(explode)

        with pytest.raises(ValueError):
            wrapped()

        assert wrapped() is None
        assert len(calls) == 1

    def test_reentrant_call_does_not_deadlock(self):
        """Test calling the wrapper from inside the wrapped function returns at once."""
        inner = []

        def outer():
            inner.append(wrapped())
            return "done"

        wrapped = once(outer)

        assert wrapped() == "done"
        assert inner == [None]
        assert wrapped() == "done"

    def test_noop(self):
        """Test noop accepts anything and returns None."""
        assert noop() is None
        assert noop(1, key="value") is None


class TestSleep:
    """Test sleep."""

    @pytest.mark.asyncio
    async def test_sleep(self):
        """Test sleep suspends for roughly the given time."""
        start = time.monotonic()

        result = await sleep(20)

        assert result is None
        assert time.monotonic() - start >= 0.015

    @pytest.mark.asyncio
    async def test_sleep_zero(self):
        """Test a zero delay resolves."""
        assert await sleep(0) is None


class TestRetry:
    """Test retry helpers."""

    @pytest.fixture
    def recorded_waits(self, monkeypatch):
        waits = []

        async def fake_sleep(ms):
            waits.append(ms)

        monkeypatch.setattr(promise_module, "sleep", fake_sleep)
        return waits

    @pytest.mark.asyncio
    async def test_returns_first_success(self, recorded_waits):
        """Test no retries happen after success."""
        async def succeed():
            return "ok"

        assert await retry(succeed) == "ok"
        assert recorded_waits == []

    @pytest.mark.asyncio
    async def test_eventually_succeeds(self, recorded_waits):
        """Test failures are retried until success."""
        attempts = []

        async def flaky():
            attempts.append(1)
            if len(attempts) < 3:
                raise ValueError(f"attempt {len(attempts)}")
            return "done"

        assert await retry(flaky, RetryOptions(retries=3, delay=5)) == "done"
        assert len(attempts) == 3
        assert recorded_waits == [5, 5]

    @pytest.mark.asyncio
    async def test_raises_last_error_after_all_attempts(self, recorded_waits, caplog):
        """Test retries=2 makes three attempts and raises the last failure."""
        attempts = []

        async def always_fail():
            attempts.append(1)
            raise RuntimeError(f"attempt {len(attempts)}")

        with caplog.at_level(logging.WARNING, logger="utilkit.timing.promise"):
            with pytest.raises(RuntimeError, match="attempt 3"):
                await retry(always_fail, RetryOptions(retries=2, delay=1))

        assert len(attempts) == 3
        assert "failed after 3 attempts" in caplog.text

    @pytest.mark.asyncio
    async def test_zero_retries(self, recorded_waits):
        """Test retries=0 makes a single attempt."""
        attempts = []

        def fail():
            attempts.append(1)
            raise KeyError("x")

        with pytest.raises(KeyError):
            await retry(fail, {'retries': 0})

        assert len(attempts) == 1
        assert recorded_waits == []

    @pytest.mark.asyncio
    async def test_default_options(self, recorded_waits):
        """Test the defaults are three retries with a 1000ms delay."""
        async def fail():
            raise ValueError("nope")

        with pytest.raises(ValueError):
            await retry(fail)

        assert recorded_waits == [1000, 1000, 1000]

    @pytest.mark.asyncio
    async def test_exponential_backoff(self, recorded_waits):
        """Test backoff doubles the wait per attempt index."""
        async def fail():
            raise ValueError("nope")

        with pytest.raises(ValueError):
            await retry(fail, RetryOptions(retries=3, delay=10, backoff=True))

        assert recorded_waits == [10, 20, 40]

    @pytest.mark.asyncio
    async def test_sync_callable(self, recorded_waits):
        """Test plain callables are accepted."""
        assert await retry(lambda: 42) == 42

    def test_retry_sync(self):
        """Test the blocking variant."""
        attempts = []

        def flaky():
            attempts.append(1)
            if len(attempts) < 2:
                raise ConnectionError("down")
            return "up"

        assert retry_sync(flaky, RetryOptions(retries=2, delay=1)) == "up"
        assert len(attempts) == 2

    def test_retry_sync_exhausted(self):
        """Test the blocking variant raises the last error."""
        attempts = []

        def fail():
            attempts.append(1)
            raise ConnectionError(f"down {len(attempts)}")

        with pytest.raises(ConnectionError, match="down 2"):
            retry_sync(fail, RetryOptions(retries=1, delay=1))


class TestTimeout:
    """Test timeout."""

    @pytest.mark.asyncio
    async def test_resolves_before_timeout(self):
        """Test the operation result is returned."""
        async def quick():
            await asyncio.sleep(0.01)
            return "fast"

        assert await timeout(quick(), 200) == "fast"

    @pytest.mark.asyncio
    async def test_default_message(self):
        """Test the default timeout message."""
        pending = asyncio.ensure_future(asyncio.sleep(1))

        with pytest.raises(OperationTimeoutError) as exc_info:
            await timeout(pending, 20)
        pending.cancel()

        assert exc_info.value.message == "Timed out after 20ms"
        assert exc_info.value.timeout_ms == 20
        assert isinstance(exc_info.value, TimeoutError)

    @pytest.mark.asyncio
    async def test_custom_message(self):
        """Test a custom timeout message."""
        pending = asyncio.ensure_future(asyncio.sleep(1))

        with pytest.raises(OperationTimeoutError) as exc_info:
            await timeout(pending, 10, "too slow")
        pending.cancel()

        assert exc_info.value.message == "too slow"

    @pytest.mark.asyncio
    async def test_passes_through_failure(self):
        """Test the operation's own error propagates."""
        async def broken():
            raise ValueError("broken")

        with pytest.raises(ValueError, match="broken"):
            await timeout(broken(), 100)

    @pytest.mark.asyncio
    async def test_does_not_cancel_operation(self):
        """Test the operation keeps running after the timer wins."""
        finished = []

        async def slow():
            await asyncio.sleep(0.05)
            finished.append(True)
            return 1

        with pytest.raises(OperationTimeoutError):
            await timeout(slow(), 10)

        await asyncio.sleep(0.1)
        assert finished == [True]

    @pytest.mark.asyncio
    async def test_abandoned_failure_is_logged(self, caplog):
        """Test a late failure of an abandoned operation is retrieved and logged."""
        async def slow_failure():
            await asyncio.sleep(0.03)
            raise ValueError("late")

        with caplog.at_level(logging.DEBUG, logger="utilkit.timing.promise"):
            with pytest.raises(OperationTimeoutError):
                await timeout(slow_failure(), 5)
            await asyncio.sleep(0.08)

        assert "late" in caplog.text


class TestCatchError:
    """Test catch_error."""

    @pytest.mark.asyncio
    async def test_success(self):
        """Test successful results are wrapped."""
        async def load():
            return {'id': 1}

        result = await catch_error(load)

        assert isinstance(result, CatchResult)
        assert result.ok is True
        assert result.data == {'id': 1}
        assert result.error is None

    @pytest.mark.asyncio
    async def test_catches_everything_by_default(self):
        """Test any exception is captured without a filter."""
        async def fail():
            raise RuntimeError("boom")

        result = await catch_error(fail)

        assert result.ok is False
        assert isinstance(result.error, RuntimeError)

    @pytest.mark.asyncio
    async def test_catches_listed_types(self):
        """Test listed types and their subclasses are captured."""
        def fail():
            raise FileNotFoundError("missing")

        result = await catch_error(fail, [TypeError, OSError])

        assert result.ok is False
        assert isinstance(result.error, FileNotFoundError)

    @pytest.mark.asyncio
    async def test_rethrows_unlisted_types(self):
        """Test other exceptions propagate."""
        async def fail():
            raise KeyError("k")

        with pytest.raises(KeyError):
            await catch_error(fail, [TypeError])
