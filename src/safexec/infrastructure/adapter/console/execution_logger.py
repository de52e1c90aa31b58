import sys
from typing import Any, TextIO

from safexec.application.port import ExecutionLogger


class ConsoleExecutionLogger(ExecutionLogger):
    """Prints execution outcomes, successes to stdout and failures to stderr."""

    success_label = "Execution succeeded:"
    failure_label = "Execution failed:"

    def __init__(self, stdout: TextIO | None = None, stderr: TextIO | None = None):
        """
        :param stdout: Stream for successes, the current ``sys.stdout`` when None
        :type stdout: TextIO | None
        :param stderr: Stream for failures, the current ``sys.stderr`` when None
        :type stderr: TextIO | None
        """
        self.stdout = stdout
        self.stderr = stderr

    def log(self, error: Exception | None, result: Any = None) -> None:
        if error is not None:
            print(self.failure_label, error, file=self.stderr or sys.stderr)
        else:
            print(self.success_label, result, file=self.stdout or sys.stdout)
