import math
from collections.abc import Callable, Mapping
from enum import Enum
from numbers import Real
from typing import Any

import msgspec
from msgspec import UNSET, UnsetType

ErrorHandler = Callable[[Exception], Any]
FinallyHook = Callable[[], Any]
ResultTuple = tuple[Exception | None, Any]


class ResultStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"


def status_of(result: ResultTuple) -> ResultStatus:
    """
    Classify a result tuple returned by an execution.

    :param result: The ``(error, value)`` pair
    :type result: ResultTuple
    :returns: FAILED when the error slot is populated, SUCCESS otherwise
    :rtype: ResultStatus
    """
    error, _ = result
    return ResultStatus.SUCCESS if error is None else ResultStatus.FAILED


def _check_duration(name: str, value: Any, optional: bool = False) -> None:
    if value is UNSET or (optional and value is None):
        return
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a number of seconds, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _check_callable(name: str, value: Any) -> None:
    if value is UNSET or value is None:
        return
    if not callable(value):
        raise TypeError(f"{name} must be callable, got {type(value).__name__}")


class ExecutionOptions(msgspec.Struct, frozen=True, kw_only=True):
    """
    Call-specific options. Every field left UNSET falls back to the
    global configuration or to the built-in default.
    """

    error_handler: ErrorHandler | None | UnsetType = UNSET
    default_value: Any | UnsetType = UNSET
    finally_hook: FinallyHook | None | UnsetType = UNSET
    retries: int | UnsetType = UNSET
    retry_delay: float | UnsetType = UNSET
    timeout: float | None | UnsetType = UNSET
    logging: bool | UnsetType = UNSET
    context: Mapping[str, Any] | None | UnsetType = UNSET

    def __post_init__(self):
        if self.retries is not UNSET:
            if isinstance(self.retries, bool) or not isinstance(self.retries, int):
                raise TypeError(f"retries must be an int, got {type(self.retries).__name__}")
            if self.retries < 0:
                raise ValueError(f"retries must be non-negative, got {self.retries}")
        _check_duration("retry_delay", self.retry_delay)
        _check_duration("timeout", self.timeout, optional=True)
        if self.logging is not UNSET and not isinstance(self.logging, bool):
            raise TypeError(f"logging must be a bool, got {type(self.logging).__name__}")
        _check_callable("error_handler", self.error_handler)
        _check_callable("finally_hook", self.finally_hook)
        if self.context is not UNSET and self.context is not None and not isinstance(self.context, Mapping):
            raise TypeError(f"context must be a mapping, got {type(self.context).__name__}")


class GlobalConfig(msgspec.Struct, frozen=True, kw_only=True):
    """Process-wide fallbacks for the error handler and the default value."""

    error_handler: ErrorHandler | None = None
    default_value: Any = None

    def __post_init__(self):
        _check_callable("error_handler", self.error_handler)


class MergedOptions(msgspec.Struct, frozen=True, kw_only=True):
    """Fully resolved options for a single execution."""

    error_handler: ErrorHandler | None = None
    default_value: Any = None
    finally_hook: FinallyHook | None = None
    retries: int = 0
    retry_delay: float = 0.0
    timeout: float | None = None
    logging: bool = False
    context: Mapping[str, Any] | None = None
