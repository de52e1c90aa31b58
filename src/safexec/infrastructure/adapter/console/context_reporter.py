import sys
from typing import TextIO

from safexec.application.port import ContextReporter
from safexec.domain.value_object import MergedOptions


class ConsoleContextReporter(ContextReporter):
    """Prints the context attached to a failed execution to stderr."""

    label = "Error context:"

    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def report(self, error: Exception, options: MergedOptions) -> None:
        if options.context is not None:
            print(self.label, dict(options.context), file=self.stream or sys.stderr)
