from safexec.client import Client
from safexec.factory import create

_default_client: Client | None = None


def get_default_client() -> Client:
    """Returns the process-wide client, creating it on first use."""
    global _default_client
    if _default_client is None:
        _default_client = create()
    return _default_client


def reset_default_client() -> None:
    """Drops the process-wide client so the next call starts from the built-in configuration."""
    global _default_client
    _default_client = None
