import asyncio
import logging
from typing import Any

from safexec.application.port import Operation, TaskRunner, TimeoutGuard
from safexec.domain.exception import OperationTimeoutError
from safexec.infrastructure.adapter.aio.task_runner import AsyncioTaskRunner

logger = logging.getLogger(__name__)


class RaceTimeoutGuard(TimeoutGuard):
    """
    Races an operation against a timer.

    When the timer wins the operation is not cancelled. It keeps running as a
    detached task whose outcome is discarded once it settles.
    """

    def __init__(self, task_runner: TaskRunner | None = None):
        """
        :param task_runner: Runner used to invoke the operation
        :type task_runner: TaskRunner | None
        """
        self.task_runner = task_runner if task_runner is not None else AsyncioTaskRunner()
        self._detached: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Number of timed-out operations still running in the background."""
        return len(self._detached)

    async def run(self, operation: Operation, timeout: float | None = None) -> Any:
        if not timeout:
            return await self.task_runner.run(operation)

        task = asyncio.ensure_future(self.task_runner.run(operation))
        try:
            done, _ = await asyncio.wait({task}, timeout=timeout)
        except asyncio.CancelledError:
            logger.debug("Caller cancelled while waiting, detaching the operation")
            self._detach(task)
            raise
        if task in done:
            return task.result()

        logger.debug("Operation exceeded its %ss deadline, detaching it", timeout)
        self._detach(task)
        raise OperationTimeoutError(timeout)

    def _detach(self, task: asyncio.Task) -> None:
        self._detached.add(task)
        task.add_done_callback(self._discard)

    def _discard(self, task: asyncio.Task) -> None:
        self._detached.discard(task)
        if task.cancelled():
            return
        # Marks the outcome as retrieved
        error = task.exception()
        if error is not None:
            logger.debug("Detached operation failed after its deadline: %r", error)
