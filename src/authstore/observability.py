"""Logging setup and pre/post-call hooks for adapter operations.

Hooks are observational only. They receive the operation name and the
outcome, never the arguments, so secrets such as session tokens cannot
leak through them.
"""

from __future__ import annotations

import functools
import logging
import sys
import time
from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar

from authstore_config.settings import Settings, get_settings

T = TypeVar("T")


class OperationObserver(Protocol):
    """Receives a callback before and after every adapter operation."""

    def before(self, operation: str) -> None: ...

    def after(
        self,
        operation: str,
        duration: float,
        error: BaseException | None,
    ) -> None: ...


class LoggingObserver:
    """Default observer writing one log line per finished operation."""

    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger("authstore.adapter")

    def before(self, operation: str) -> None:
        self._logger.debug("%s started", operation)

    def after(
        self,
        operation: str,
        duration: float,
        error: BaseException | None,
    ) -> None:
        elapsed_ms = duration * 1000
        if error is None:
            self._logger.debug("%s finished in %.1f ms", operation, elapsed_ms)
        else:
            self._logger.warning(
                "%s failed after %.1f ms: %s",
                operation,
                elapsed_ms,
                type(error).__name__,
            )


def observed(
    operation: str,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Wrap an async method so ``self._observer`` sees its start and end."""

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(self: Any, *args: Any, **kwargs: Any) -> T:
            observer: OperationObserver = self._observer
            observer.before(operation)
            started = time.perf_counter()
            try:
                result = await func(self, *args, **kwargs)
            except BaseException as e:
                observer.after(operation, time.perf_counter() - started, e)
                raise
            observer.after(operation, time.perf_counter() - started, None)
            return result

        return wrapper

    return decorator


def configure_logging(settings: Settings | None = None) -> None:
    """Configure console logging for applications embedding the adapter.

    Sets up:
    - Console output with timestamps and module names
    - Configurable log level for authstore modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    settings = settings or get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    logging.getLogger("authstore").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
