from typing import Any

from msgspec import UNSET

from safexec.domain.value_object import ExecutionOptions, GlobalConfig, MergedOptions


def load_options(data: dict[str, Any] | ExecutionOptions | None) -> ExecutionOptions:
    """
    Builds call-specific options from a plain dictionary.

    :param data: Option fields as a dictionary, an ExecutionOptions instance, or None
    :type data: dict[str, Any] | ExecutionOptions | None
    :returns: The corresponding ExecutionOptions
    :rtype: ExecutionOptions
    :raises TypeError: If the dictionary holds unknown fields or values of the wrong kind
    :raises ValueError: If a value is out of range
    """
    if data is None:
        return ExecutionOptions()
    if isinstance(data, ExecutionOptions):
        return data
    if not isinstance(data, dict):
        raise TypeError(f"options must be a dict or ExecutionOptions, got {type(data).__name__}")
    return ExecutionOptions(**data)


def merge_options(config: GlobalConfig, options: ExecutionOptions) -> MergedOptions:
    """
    Overlays call-specific options onto the global configuration.

    Fields set on ``options`` win, including an explicit None. The error
    handler and default value fall back to ``config``; everything else falls
    back to the MergedOptions defaults. Neither input is modified.

    :param config: The global configuration
    :type config: GlobalConfig
    :param options: The call-specific options
    :type options: ExecutionOptions
    :returns: The resolved options for one execution
    :rtype: MergedOptions
    """
    resolved = {name: getattr(config, name) for name in config.__struct_fields__}
    for name in options.__struct_fields__:
        value = getattr(options, name)
        if value is not UNSET:
            resolved[name] = value
    return MergedOptions(**resolved)
