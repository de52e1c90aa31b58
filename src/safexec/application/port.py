from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Any

from safexec.domain.value_object import MergedOptions

Operation = Callable[[], Any | Awaitable[Any]]


class TaskRunner(ABC):
    """Abstract interface for invoking a single operation."""

    @abstractmethod
    async def run(self, operation: Operation) -> Any:
        """
        Invoke the operation once, awaiting its result when it is awaitable.

        :param operation: Zero-argument callable, sync or async
        :type operation: Operation
        :returns: The value produced by the operation
        :rtype: Any
        :raises Exception: Whatever the operation raises, unchanged
        """


class Retrier(ABC):
    """Abstract interface for bounded re-invocation of a failing operation."""

    @abstractmethod
    async def run(self, operation: Operation, retries: int = 0, delay: float = 0.0) -> Any:
        """
        Run the operation, retrying it up to ``retries`` more times on failure.

        :param operation: Zero-argument callable, sync or async
        :type operation: Operation
        :param retries: Number of additional attempts after the first one
        :type retries: int
        :param delay: Seconds to wait between attempts
        :type delay: float
        :returns: The value of the first successful attempt
        :rtype: Any
        :raises Exception: The failure of the last attempt, unchanged
        """


class TimeoutGuard(ABC):
    """Abstract interface for enforcing a deadline on an operation."""

    @abstractmethod
    async def run(self, operation: Operation, timeout: float | None = None) -> Any:
        """
        Run the operation against a deadline.

        :param operation: Zero-argument callable, sync or async
        :type operation: Operation
        :param timeout: Deadline in seconds; None or 0 disables it
        :type timeout: float | None
        :returns: The value of the operation if it settles first
        :rtype: Any
        :raises OperationTimeoutError: If the deadline elapses first
        """


class ExecutionLogger(ABC):
    """Abstract sink reporting the outcome of an execution."""

    @abstractmethod
    def log(self, error: Exception | None, result: Any = None) -> None:
        """
        Report a success (``error`` is None) or a failure.

        :param error: The failure, or None on success
        :type error: Exception | None
        :param result: The value produced on success
        :type result: Any
        """


class ContextReporter(ABC):
    """Abstract sink reporting diagnostic context for a failed execution."""

    @abstractmethod
    def report(self, error: Exception, options: MergedOptions) -> None:
        """
        Report the context attached to the options, if any.

        :param error: The failure being handled
        :type error: Exception
        :param options: The resolved options of the execution
        :type options: MergedOptions
        """
