import asyncio
from collections.abc import Iterable
from typing import Any

from safexec.application.port import Operation
from safexec.application.service import Executor
from safexec.domain.value_object import ExecutionOptions, GlobalConfig, ResultTuple

Options = ExecutionOptions | dict[str, Any] | None


class Client:
    """
    Unified client façade for safe execution.

    The Client is the only thing users interact with. It exposes .execute(),
    .execute_batch() and .configure(), plus blocking .run() and .run_batch()
    for code that has no event loop of its own. It holds a reference to the
    Executor doing the actual work.
    """

    def __init__(self, executor: Executor):
        """
        :param executor: The executor that runs the operations
        :type executor: Executor
        """
        self._executor = executor

    @property
    def executor(self) -> Executor:
        return self._executor

    @property
    def config(self) -> GlobalConfig:
        return self._executor.config

    def configure(self, config: GlobalConfig | None = None, **fields: Any) -> "Client":
        """
        Update the global error handler and/or default value.

        :param config: A complete replacement configuration
        :type config: GlobalConfig | None
        :param fields: Individual fields to replace
        :returns: The client instance for method chaining
        :rtype: Client
        """
        self._executor.configure(config, **fields)
        return self

    async def execute(self, operation: Operation, options: Options = None) -> ResultTuple:
        """
        Execute one operation.

        :param operation: Zero-argument callable, sync or async
        :type operation: Operation
        :param options: Call-specific options
        :type options: ExecutionOptions | dict[str, Any] | None
        :returns: The ``(error, value)`` pair
        :rtype: ResultTuple
        """
        return await self._executor.execute(operation, options)

    async def execute_batch(self, operations: Iterable[Operation], options: Options = None) -> list[ResultTuple]:
        """
        Execute several operations concurrently.

        :param operations: The operations to execute
        :type operations: Iterable[Operation]
        :param options: Options applied to every execution
        :type options: ExecutionOptions | dict[str, Any] | None
        :returns: One ``(error, value)`` pair per operation, in input order
        :rtype: list[ResultTuple]
        """
        return await self._executor.execute_batch(operations, options)

    def run(self, operation: Operation, options: Options = None) -> ResultTuple:
        """
        Blocking variant of :meth:`execute` driving its own event loop.

        :raises RuntimeError: If called from a running event loop
        """
        return asyncio.run(self.execute(operation, options))

    def run_batch(self, operations: Iterable[Operation], options: Options = None) -> list[ResultTuple]:
        """
        Blocking variant of :meth:`execute_batch` driving its own event loop.

        :raises RuntimeError: If called from a running event loop
        """
        return asyncio.run(self.execute_batch(operations, options))
