"""
safexec - Safe Execution Toolkit

Runs sync or async operations and returns ``(error, value)`` tuples instead of
raising, with optional retries, timeouts, logging and cleanup hooks.
"""

from collections.abc import Iterable
from typing import Any

from safexec.application.port import Operation
from safexec.application.service import Executor
from safexec.client import Client, Options
from safexec.domain.exception import OperationTimeoutError
from safexec.domain.value_object import (
    ExecutionOptions,
    GlobalConfig,
    ResultStatus,
    ResultTuple,
    status_of,
)
from safexec.factory import create
from safexec.infrastructure.provider import get_default_client


def configure(config: GlobalConfig | None = None, **fields: Any) -> None:
    """Updates the global configuration of the default client."""
    get_default_client().configure(config, **fields)


async def execute(operation: Operation, options: Options = None) -> ResultTuple:
    """Executes one operation with the default client."""
    return await get_default_client().execute(operation, options)


async def execute_batch(operations: Iterable[Operation], options: Options = None) -> list[ResultTuple]:
    """Executes operations concurrently with the default client."""
    return await get_default_client().execute_batch(operations, options)


def run(operation: Operation, options: Options = None) -> ResultTuple:
    """Blocking variant of :func:`execute`."""
    return get_default_client().run(operation, options)


def run_batch(operations: Iterable[Operation], options: Options = None) -> list[ResultTuple]:
    """Blocking variant of :func:`execute_batch`."""
    return get_default_client().run_batch(operations, options)


__all__ = [
    "Client",
    "Executor",
    "ExecutionOptions",
    "GlobalConfig",
    "OperationTimeoutError",
    "ResultStatus",
    "ResultTuple",
    "configure",
    "create",
    "execute",
    "execute_batch",
    "run",
    "run_batch",
    "status_of",
]
