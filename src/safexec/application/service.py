import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from msgspec import structs

from safexec.application.port import (
    ContextReporter,
    ExecutionLogger,
    Operation,
    Retrier,
    TimeoutGuard,
)
from safexec.domain.service import load_options, merge_options
from safexec.domain.value_object import (
    ExecutionOptions,
    GlobalConfig,
    MergedOptions,
    ResultTuple,
)

logger = logging.getLogger(__name__)


class Executor:
    """
    Runs operations through timeout, retry, logging and handler hooks and
    returns ``(error, value)`` tuples instead of raising.

    Note:
        Concrete collaborators (retrier, timeout guard, sinks) are wired in a
        composition root such as ``safexec.factory.create`` and injected here.
    """

    def __init__(
        self,
        retrier: Retrier,
        timeout_guard: TimeoutGuard,
        execution_logger: ExecutionLogger,
        context_reporter: ContextReporter,
        config: GlobalConfig | None = None,
    ):
        """
        :param retrier: Retry primitive wrapped around every operation
        :type retrier: Retrier
        :param timeout_guard: Timeout primitive wrapped around the retries
        :type timeout_guard: TimeoutGuard
        :param execution_logger: Sink used when logging is enabled
        :type execution_logger: ExecutionLogger
        :param context_reporter: Sink reporting context on failure
        :type context_reporter: ContextReporter
        :param config: Global configuration, an empty one when None
        :type config: GlobalConfig | None
        """
        self.retrier = retrier
        self.timeout_guard = timeout_guard
        self.execution_logger = execution_logger
        self.context_reporter = context_reporter
        self._config = config if config is not None else GlobalConfig()

    @property
    def config(self) -> GlobalConfig:
        return self._config

    def configure(self, config: GlobalConfig | None = None, **fields: Any) -> None:
        """
        Replaces the global configuration.

        Named fields are replaced and the others keep their current value.
        A whole GlobalConfig may be passed instead to swap it in as is.

        :param config: A complete replacement configuration
        :type config: GlobalConfig | None
        :param fields: Individual fields to replace (error_handler, default_value)
        :raises TypeError: If a field is unknown
        """
        base = config if config is not None else self._config
        self._config = GlobalConfig(**{**structs.asdict(base), **fields}) if fields else base

    async def execute(
        self, operation: Operation, options: ExecutionOptions | dict[str, Any] | None = None
    ) -> ResultTuple:
        """
        Executes a single operation and captures its outcome.

        :param operation: Zero-argument callable, sync or async
        :type operation: Operation
        :param options: Call-specific options overriding the global configuration
        :type options: ExecutionOptions | dict[str, Any] | None
        :returns: ``(None, value)`` on success, ``(error, default_value)`` on failure
        :rtype: ResultTuple
        """
        merged = merge_options(self._config, load_options(options))
        try:
            value = await self.timeout_guard.run(
                lambda: self.retrier.run(operation, merged.retries, merged.retry_delay),
                merged.timeout,
            )
        except Exception as e:
            self._handle_failure(e, merged)
            result = (e, merged.default_value)
        else:
            if merged.logging:
                self._call_hook("execution logger", self.execution_logger.log, None, value)
            result = (None, value)
        finally:
            if merged.finally_hook is not None:
                self._call_hook("finally hook", merged.finally_hook)
        return result

    async def execute_batch(
        self,
        operations: Iterable[Operation],
        options: ExecutionOptions | dict[str, Any] | None = None,
    ) -> list[ResultTuple]:
        """
        Executes all operations concurrently with the same options.

        :param operations: The operations to execute
        :type operations: Iterable[Operation]
        :param options: Options applied to every execution
        :type options: ExecutionOptions | dict[str, Any] | None
        :returns: One result tuple per operation, in input order
        :rtype: list[ResultTuple]
        """
        options = load_options(options)
        results = await asyncio.gather(*(self.execute(operation, options) for operation in operations))
        return list(results)

    def _handle_failure(self, error: Exception, merged: MergedOptions) -> None:
        self._call_hook("context reporter", self.context_reporter.report, error, merged)
        if merged.logging:
            self._call_hook("execution logger", self.execution_logger.log, error)
        if merged.error_handler is not None:
            self._call_hook("error handler", merged.error_handler, error)

    @staticmethod
    def _call_hook(name: str, hook: Any, *args: Any) -> None:
        try:
            hook(*args)
        except Exception:
            logger.exception("The %s raised an exception", name)
