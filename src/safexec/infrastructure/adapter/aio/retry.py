import asyncio
import logging
from typing import Any

from safexec.application.port import Operation, Retrier, TaskRunner
from safexec.infrastructure.adapter.aio.task_runner import AsyncioTaskRunner

logger = logging.getLogger(__name__)


class FixedDelayRetrier(Retrier):
    """Retries a failing operation with a constant pause between attempts."""

    def __init__(self, task_runner: TaskRunner | None = None):
        """
        :param task_runner: Runner used for every attempt
        :type task_runner: TaskRunner | None
        """
        self.task_runner = task_runner if task_runner is not None else AsyncioTaskRunner()

    async def run(self, operation: Operation, retries: int = 0, delay: float = 0.0) -> Any:
        """
        Run the operation at most ``retries + 1`` times.

        The delay is only applied between attempts, never before the first
        one. The last failure is re-raised as is.

        :param operation: Zero-argument callable, sync or async
        :type operation: Operation
        :param retries: Number of additional attempts after the first one
        :type retries: int
        :param delay: Seconds to wait between attempts
        :type delay: float
        :returns: The value of the first successful attempt
        :rtype: Any
        """
        attempts = 0
        while True:
            try:
                return await self.task_runner.run(operation)
            except Exception as e:
                attempts += 1
                if attempts > retries:
                    raise
                logger.debug("Attempt %d/%d failed: %r", attempts, retries + 1, e)
                if delay:
                    await asyncio.sleep(delay)
