"""
Tests for domain services.

This module tests option loading and the merge of call-specific options
onto the global configuration.
"""

import pytest

from safexec.domain.exception import OperationTimeoutError
from safexec.domain.service import load_options, merge_options
from safexec.domain.value_object import ExecutionOptions, GlobalConfig, MergedOptions


def global_handler(error):
    pass


def call_handler(error):
    pass


class TestLoadOptions:
    """Test cases for load_options."""

    def test_load_none(self):
        """Test that None yields empty options."""
        assert load_options(None) == ExecutionOptions()

    def test_load_instance_is_returned_as_is(self):
        """Test that ExecutionOptions instances pass through."""
        options = ExecutionOptions(retries=2)

        assert load_options(options) is options

    def test_load_dict(self):
        """Test loading options from a dictionary."""
        options = load_options({"retries": 2, "timeout": 1.5, "logging": True})

        assert options == ExecutionOptions(retries=2, timeout=1.5, logging=True)

    def test_load_dict_with_unknown_field(self):
        """Test that unknown fields are rejected."""
        with pytest.raises(TypeError):
            load_options({"retry": 2})

    def test_load_dict_with_invalid_value(self):
        """Test that invalid values are rejected."""
        with pytest.raises(ValueError):
            load_options({"retries": -2})

    def test_load_unsupported_type(self):
        """Test that other types are rejected."""
        with pytest.raises(TypeError, match="options must be a dict or ExecutionOptions"):
            load_options([("retries", 1)])


class TestMergeOptions:
    """Test cases for merge_options."""

    def test_merge_empty_options_uses_global_and_defaults(self):
        """Test that global fields and built-in defaults are used."""
        config = GlobalConfig(error_handler=global_handler, default_value="fallback")

        merged = merge_options(config, ExecutionOptions())

        assert merged == MergedOptions(error_handler=global_handler, default_value="fallback")

    def test_merge_call_fields_take_precedence(self):
        """Test that call-specific fields override the global ones."""
        config = GlobalConfig(error_handler=global_handler, default_value="fallback")
        options = ExecutionOptions(error_handler=call_handler, default_value=0, retries=3, timeout=2.0)

        merged = merge_options(config, options)

        assert merged.error_handler is call_handler
        assert merged.default_value == 0
        assert merged.retries == 3
        assert merged.timeout == 2.0

    def test_merge_explicit_none_overrides_global(self):
        """Test that an explicit None counts as present."""
        config = GlobalConfig(error_handler=global_handler, default_value="fallback")
        options = ExecutionOptions(error_handler=None, default_value=None)

        merged = merge_options(config, options)

        assert merged.error_handler is None
        assert merged.default_value is None

    def test_merge_keeps_context(self):
        """Test that context data is carried over."""
        merged = merge_options(GlobalConfig(), ExecutionOptions(context={"user_id": 123}))

        assert merged.context == {"user_id": 123}

    def test_merge_does_not_mutate_inputs(self):
        """Test that merging is pure."""
        config = GlobalConfig(error_handler=global_handler, default_value="fallback")
        options = ExecutionOptions(default_value=1)

        merge_options(config, options)

        assert config == GlobalConfig(error_handler=global_handler, default_value="fallback")
        assert options == ExecutionOptions(default_value=1)


class TestOperationTimeoutError:
    """Test cases for OperationTimeoutError."""

    def test_message(self):
        """Test the fixed message."""
        assert str(OperationTimeoutError()) == "Operation timed out"

    def test_is_timeout_error(self):
        """Test that it can be caught as a TimeoutError."""
        assert isinstance(OperationTimeoutError(1.0), TimeoutError)

    def test_carries_timeout(self):
        """Test that the elapsed deadline is kept."""
        assert OperationTimeoutError(0.25).timeout == 0.25
