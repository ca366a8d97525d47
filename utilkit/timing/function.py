"""
Function wrappers for utilkit.
Provides debounce, throttle and once wrappers built on a single owned timer.

Timers run on the current asyncio event loop when one is running, otherwise
on a daemon threading.Timer.
"""

import asyncio
import functools
import inspect
import logging
import threading
import time
from typing import Any, Callable, Dict, Optional, Set, Tuple

logger = logging.getLogger(__name__)


def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def _schedule(delay_ms: float, callback: Callable[[], None]) -> Any:
    """Schedule a callback and return a handle exposing cancel()."""
    delay = max(delay_ms, 0) / 1000
    loop = _running_loop()
    if loop is not None:
        return loop.call_later(delay, callback)

    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


class _TimedWrapper:
    """Shared state for wrappers that own at most one pending timer."""

    def __init__(self, fn: Callable):
        functools.update_wrapper(self, fn)
        self._fn = fn
        self._lock = threading.Lock()
        self._timer: Any = None
        self._generation = 0
        self._tasks: Set[asyncio.Future] = set()

    @property
    def pending(self) -> bool:
        """True while a delayed call is scheduled."""
        with self._lock:
            return self._timer is not None

    def cancel(self) -> None:
        """Discard any pending call. Safe to call when nothing is pending."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
                logger.debug(f"Cancelled pending call to {getattr(self._fn, '__name__', self._fn)}")

    def _invoke(self, args: Tuple, kwargs: Dict[str, Any]) -> None:
        """Call fn. Coroutines become tracked tasks on the loop, or run to completion without one."""
        result = self._fn(*args, **kwargs)
        if not inspect.isawaitable(result):
            return

        if _running_loop() is None:
            asyncio.run(result)
            return

        task = asyncio.ensure_future(result)
        self._tasks.add(task)
        task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Future) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(f"Scheduled call to {getattr(self._fn, '__name__', self._fn)} failed: {error}")

    def _arm(self, delay_ms: float, args: Tuple, kwargs: Dict[str, Any]) -> None:
        # Caller holds the lock
        self._generation += 1
        generation = self._generation
        self._timer = _schedule(delay_ms, lambda: self._fire(generation, args, kwargs))

    def _take(self, generation: int) -> bool:
        # A timer that fired after being replaced or cancelled is ignored
        with self._lock:
            if generation != self._generation or self._timer is None:
                return False
            self._timer = None
            return True

    def _fire(self, generation: int, args: Tuple, kwargs: Dict[str, Any]) -> None:
        if self._take(generation):
            self._invoke(args, kwargs)


class Debounced(_TimedWrapper):
    """
    Delays calls until `delay_ms` has passed without another call.

    Only the arguments of the last call in a burst reach the wrapped function.
    """

    def __init__(self, fn: Callable, delay_ms: float):
        super().__init__(fn)
        self.delay_ms = delay_ms

    def __call__(self, *args, **kwargs) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._arm(self.delay_ms, args, kwargs)


class Throttled(_TimedWrapper):
    """
    Runs the wrapped function at most once per `interval_ms`.

    The first call in an interval runs immediately. Calls made during the
    interval are suppressed, and the latest of them runs once when the
    interval ends.
    """

    def __init__(self, fn: Callable, interval_ms: float):
        super().__init__(fn)
        self.interval_ms = interval_ms
        self._last_run: Optional[float] = None
        self._trailing: Optional[Tuple[Tuple, Dict[str, Any]]] = None

    def _remaining_ms(self, now: float) -> float:
        if self._last_run is None:
            return 0
        return self.interval_ms - (now - self._last_run) * 1000

    def __call__(self, *args, **kwargs) -> None:
        now = time.monotonic()
        with self._lock:
            remaining = self._remaining_ms(now)
            if remaining <= 0:
                if self._timer is not None:
                    self._timer.cancel()
                    self._timer = None
                self._trailing = None
                self._last_run = now
                run_now = True
            else:
                self._trailing = (args, kwargs)
                if self._timer is None:
                    self._arm(remaining, args, kwargs)
                run_now = False

        if run_now:
            self._invoke(args, kwargs)

    def cancel(self) -> None:
        with self._lock:
            self._trailing = None
        super().cancel()

    def _fire(self, generation: int, args: Tuple, kwargs: Dict[str, Any]) -> None:
        with self._lock:
            if generation != self._generation or self._timer is None:
                return
            self._timer = None
            self._last_run = time.monotonic()
            if self._trailing is not None:
                args, kwargs = self._trailing
            self._trailing = None
        self._invoke(args, kwargs)


def debounce(fn: Callable, delay_ms: float) -> Debounced:
    """
    Wrap fn so that it runs only after `delay_ms` without further calls.

    Example:
        >>> save = debounce(write_to_disk, 300)
        >>> save(doc)  # runs 300ms after the last save() call
        >>> save.cancel()
    """
    return Debounced(fn, delay_ms)


def throttle(fn: Callable, interval_ms: float) -> Throttled:
    """Wrap fn so that it runs at most once per `interval_ms`, with a trailing call."""
    return Throttled(fn, interval_ms)


def once(fn: Callable) -> Callable:
    """
    Wrap fn so that only the first call runs it.

    Later calls return the first result, whatever arguments they pass. If the
    first call raises, fn is not run again and later calls return None.
    A call made from inside fn also returns None.
    """
    lock = threading.RLock()
    called = False
    result = None

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        nonlocal called, result
        with lock:
            if not called:
                called = True
                result = fn(*args, **kwargs)
            return result

    return wrapper


def noop(*args, **kwargs) -> None:
    """Accept any arguments and do nothing."""
