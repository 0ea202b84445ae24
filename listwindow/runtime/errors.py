"""Shared list-window exception taxonomy and recoverable-error policy."""

from __future__ import annotations

import logging
from typing import TypeAlias


class ListWindowError(Exception):
    """Base class for list-window failures."""


class InvalidConfiguration(ListWindowError, ValueError):
    """Layout parameters or item count cannot produce a valid window.

    Raised synchronously when a window is constructed, never from a
    per-scroll recomputation.
    """


# Explicitly bounded set of subscriber failures tolerated during fan-out.
RecoverableRuntimeErrors: TypeAlias = tuple[type[BaseException], ...]
RECOVERABLE_RUNTIME_ERRORS: RecoverableRuntimeErrors = (
    RuntimeError,
    OSError,
    ValueError,
    TypeError,
    AttributeError,
    LookupError,
)

# Classification tag for host values clamped back into range. Not an exception.
TRANSIENT_OUT_OF_RANGE = "transient_out_of_range"


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True)


def log_transient_out_of_range(logger: logging.Logger, field: str, raw: float, clamped: float) -> None:
    """Record a silently clamped host value."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%s field=%s raw=%r clamped=%r",
            TRANSIENT_OUT_OF_RANGE,
            field,
            raw,
            clamped,
        )
