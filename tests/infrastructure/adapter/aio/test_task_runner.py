"""
Tests for the asyncio task runner.

This module tests the AsyncioTaskRunner implementation.
"""

import pytest

from safexec.application.port import TaskRunner
from safexec.infrastructure.adapter.aio.task_runner import AsyncioTaskRunner


class Counter:
    """Callable object counting its invocations."""

    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.calls


class TestAsyncioTaskRunner:
    """Test cases for AsyncioTaskRunner."""

    def setup_method(self):
        """Setup test fixtures."""
        self.runner = AsyncioTaskRunner()

    def test_is_task_runner(self):
        """Test that the runner implements the port."""
        assert isinstance(self.runner, TaskRunner)

    @pytest.mark.asyncio
    async def test_run_sync_operation(self):
        """Test running a synchronous operation."""
        result = await self.runner.run(lambda: 42)

        assert result == 42

    @pytest.mark.asyncio
    async def test_run_async_operation(self):
        """Test running an asynchronous operation."""

        async def operation():
            return "async result"

        result = await self.runner.run(operation)

        assert result == "async result"

    @pytest.mark.asyncio
    async def test_run_callable_object(self):
        """Test running a callable object."""
        counter = Counter()

        assert await self.runner.run(counter) == 1
        assert await self.runner.run(counter) == 2

    @pytest.mark.asyncio
    async def test_run_sync_operation_raising(self):
        """Test that synchronous failures propagate unchanged."""
        error = RuntimeError("sync failure")

        def operation():
            raise error

        with pytest.raises(RuntimeError) as exc_info:
            await self.runner.run(operation)

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_run_async_operation_raising(self):
        """Test that asynchronous failures propagate unchanged."""

        async def operation():
            raise KeyError("missing")

        with pytest.raises(KeyError, match="missing"):
            await self.runner.run(operation)
