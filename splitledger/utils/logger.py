"""
Package logger built on loguru

splitledger is a library: its records are disabled until the host
application opts in with ``logs.enable()`` (or ``logger.enable("splitledger")``).
``logs.configure()`` adds a stderr sink for scripts and debugging sessions.
"""

import sys
from functools import wraps
from time import perf_counter
from typing import Any, Callable

from loguru import logger

PACKAGE_NAME = "splitledger"


class Logging:
    """
    Thin wrapper around the global loguru logger.

    - log methods attribute records to the calling module (opt(depth=1))
    - disabled for the package until enable()/configure() is called
    - timing decorator for engine stages
    """

    def __init__(self, name: str = PACKAGE_NAME):
        self.name = name
        self._sink_id: int | None = None
        logger.disable(self.name)

    def enable(self) -> None:
        logger.enable(self.name)

    def disable(self) -> None:
        logger.disable(self.name)

    def configure(self, level: str = "INFO", sink: Any = None) -> None:
        """
        Enable package records and route them to a sink.

        Args:
            level: Minimum level (DEBUG, INFO, WARNING, ...)
            sink: Any loguru sink (default: sys.stderr)
        """
        if self._sink_id is not None:
            logger.remove(self._sink_id)

        self._sink_id = logger.add(
            sink if sink is not None else sys.stderr,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}",
            filter=self.name,
        )
        self.enable()

    # ----------- log methods -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.opt(depth=1).exception(msg, *args, **kwargs)

    # ---------- decorators ----------
    def timed(self, stage: str) -> Callable:
        """
        Log the duration of a call at debug level.

        Exceptions are logged and re-raised unchanged. Records are emitted
        from this module so they stay under the package's enable/disable
        switch whoever the caller is.
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start = perf_counter()
                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.debug(f"[{stage}] {func.__qualname__} failed")
                    raise

                cost = perf_counter() - start
                logger.debug(f"[{stage}] {func.__qualname__} took {cost:.6f}s")
                return result

            return wrapper

        return decorator


logs = Logging()
