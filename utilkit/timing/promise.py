"""
Async helpers for utilkit.
Provides sleep, retry with optional exponential backoff, timeouts and
error capture for awaitable operations.
"""

import asyncio
import inspect
import logging
import time
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, Iterable, Optional, Type, TypeVar, Union

from ..core.errors import OperationTimeoutError
from ..core.types import CatchResult, RetryOptions

logger = logging.getLogger(__name__)

T = TypeVar('T')

RetryConfig = Union[RetryOptions, Mapping, None]


def _retry_options(options: RetryConfig) -> RetryOptions:
    if options is None:
        return RetryOptions()
    if isinstance(options, Mapping):
        return RetryOptions(**options)
    return options


async def sleep(ms: float) -> None:
    """Suspend the current coroutine for `ms` milliseconds."""
    await asyncio.sleep(max(ms, 0) / 1000)


async def retry(fn: Callable[[], Any], options: RetryConfig = None) -> Any:
    """
    Call fn until it succeeds, up to `retries + 1` attempts.

    Args:
        fn: Zero-argument callable returning a value or an awaitable
        options: RetryOptions or a mapping of its fields

    Returns:
        The result of the first successful attempt

    Raises:
        The exception of the last attempt when every attempt fails
    """
    options = _retry_options(options)
    attempts = max(options.retries, 0) + 1
    last_error: Optional[Exception] = None

    for attempt in range(attempts):
        try:
            result = fn()
            if inspect.isawaitable(result):
                result = await result
            return result
        except Exception as e:
            last_error = e
            if attempt < attempts - 1:
                wait_ms = options.wait_for(attempt)
                logger.warning(f"Attempt {attempt + 1} failed, retrying in {wait_ms}ms: {e}")
                await sleep(wait_ms)
            else:
                logger.error(f"Operation failed after {attempt + 1} attempts: {e}")

    raise last_error


def retry_sync(fn: Callable[[], T], options: RetryConfig = None) -> T:
    """Blocking variant of retry() for plain callables."""
    options = _retry_options(options)
    attempts = max(options.retries, 0) + 1
    last_error: Optional[Exception] = None

    for attempt in range(attempts):
        try:
            return fn()
        except Exception as e:
            last_error = e
            if attempt < attempts - 1:
                wait_ms = options.wait_for(attempt)
                logger.warning(f"Attempt {attempt + 1} failed, retrying in {wait_ms}ms: {e}")
                time.sleep(max(wait_ms, 0) / 1000)
            else:
                logger.error(f"Operation failed after {attempt + 1} attempts: {e}")

    raise last_error


def _log_abandoned(task: asyncio.Future) -> None:
    if task.cancelled():
        return
    error = task.exception()
    if error is not None:
        logger.debug(f"Operation abandoned by timeout later failed: {error}")


async def timeout(awaitable: Awaitable[T], ms: float, message: Optional[str] = None) -> T:
    """
    Await an operation, failing if it does not finish within `ms` milliseconds.

    The operation is not cancelled when the timer wins; cancel it yourself
    if it should stop.

    Raises:
        OperationTimeoutError: If the timer elapses first
    """
    task = asyncio.ensure_future(awaitable)
    done, _ = await asyncio.wait({task}, timeout=max(ms, 0) / 1000)

    if task in done:
        return task.result()

    task.add_done_callback(_log_abandoned)
    text = message if message is not None else f"Timed out after {ms}ms"
    raise OperationTimeoutError(text, timeout_ms=ms)


async def catch_error(
    fn: Callable[[], Any],
    errors: Optional[Iterable[Type[BaseException]]] = None
) -> CatchResult:
    """
    Run fn and capture its failure as a value.

    Args:
        fn: Zero-argument callable returning a value or an awaitable
        errors: Exception types to capture; all exceptions when None

    Returns:
        CatchResult with ok=True and data, or ok=False and the error

    Raises:
        Any exception not listed in `errors`
    """
    catchable = tuple(errors) if errors is not None else (Exception,)
    try:
        data = fn()
        if inspect.isawaitable(data):
            data = await data
    except catchable as e:
        return CatchResult(ok=False, error=e)
    return CatchResult(ok=True, data=data)
