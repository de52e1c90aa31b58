class OperationTimeoutError(TimeoutError):
    """Raised when an operation does not settle before its deadline."""

    message = "Operation timed out"

    def __init__(self, timeout: float | None = None):
        """
        :param timeout: The deadline that elapsed, in seconds
        :type timeout: float | None
        """
        super().__init__(self.message)
        self.timeout = timeout
