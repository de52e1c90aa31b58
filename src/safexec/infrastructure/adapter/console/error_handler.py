import sys

GLOBAL_ERROR_LABEL = "Global safexec error:"


def print_error(error: Exception) -> None:
    """Built-in global error handler: prints the failure to stderr."""
    print(GLOBAL_ERROR_LABEL, error, file=sys.stderr)
