from typing import TextIO

from safexec.application.service import Executor
from safexec.client import Client
from safexec.domain.value_object import GlobalConfig
from safexec.infrastructure.adapter.aio.retry import FixedDelayRetrier
from safexec.infrastructure.adapter.aio.task_runner import AsyncioTaskRunner
from safexec.infrastructure.adapter.aio.timeout import RaceTimeoutGuard
from safexec.infrastructure.adapter.console.context_reporter import ConsoleContextReporter
from safexec.infrastructure.adapter.console.error_handler import print_error
from safexec.infrastructure.adapter.console.execution_logger import ConsoleExecutionLogger


def create(
    config: GlobalConfig | None = None,
    *,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> Client:
    """
    Factory function to create a Client running on asyncio with console sinks.

    :param config: Initial global configuration; defaults to the built-in
        stderr error handler and a None default value
    :type config: GlobalConfig | None
    :param stdout: Stream for success logs, the current ``sys.stdout`` when None
    :type stdout: TextIO | None
    :param stderr: Stream for failure logs and context, the current ``sys.stderr`` when None
    :type stderr: TextIO | None
    :returns: A configured Client instance
    :rtype: Client
    """
    if config is None:
        config = GlobalConfig(error_handler=print_error)

    task_runner = AsyncioTaskRunner()
    executor = Executor(
        retrier=FixedDelayRetrier(task_runner),
        timeout_guard=RaceTimeoutGuard(task_runner),
        execution_logger=ConsoleExecutionLogger(stdout=stdout, stderr=stderr),
        context_reporter=ConsoleContextReporter(stream=stderr),
        config=config,
    )
    return Client(executor)
