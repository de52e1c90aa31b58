import inspect
from typing import Any

from safexec.application.port import Operation, TaskRunner


class AsyncioTaskRunner(TaskRunner):
    async def run(self, operation: Operation) -> Any:
        """
        Invoke a sync or async operation on the running event loop.

        :param operation: Zero-argument callable returning a value or an awaitable
        :type operation: Operation
        :returns: The value produced by the operation
        :rtype: Any
        """
        result = operation()
        if inspect.isawaitable(result):
            result = await result
        return result
