"""Tests for the debounce coordinator."""

import asyncio

import pytest

from storefront.catalog.debounce import DebounceCoordinator
from storefront.domain.exceptions import CoordinatorDisposedError

SETTLE = 0.02


class TestDebounceCoordinator:
    """Tests for DebounceCoordinator."""

    @pytest.mark.asyncio
    async def test_fires_after_delay(self) -> None:
        """A scheduled task runs once the delay elapses."""
        calls: list[str] = []
        coordinator = DebounceCoordinator(SETTLE)

        coordinator.schedule(lambda: calls.append("run"))
        assert coordinator.is_computing
        assert calls == []

        await asyncio.sleep(SETTLE * 5)
        assert calls == ["run"]
        assert not coordinator.is_computing
        assert not coordinator.pending

    @pytest.mark.asyncio
    async def test_burst_coalesces_to_latest(self) -> None:
        """Only the most recently scheduled task fires."""
        calls: list[int] = []
        coordinator = DebounceCoordinator(SETTLE)

        for i in range(5):
            coordinator.schedule(lambda i=i: calls.append(i))
        await asyncio.sleep(SETTLE * 5)

        assert calls == [4]

    @pytest.mark.asyncio
    async def test_reschedule_restarts_delay(self) -> None:
        """A new mutation pushes the recompute back."""
        calls: list[str] = []
        coordinator = DebounceCoordinator(SETTLE * 4)

        coordinator.schedule(lambda: calls.append("first"))
        await asyncio.sleep(SETTLE * 2)
        coordinator.schedule(lambda: calls.append("second"))
        await asyncio.sleep(SETTLE * 2)
        assert calls == []

        await asyncio.sleep(SETTLE * 8)
        assert calls == ["second"]

    @pytest.mark.asyncio
    async def test_cancel(self) -> None:
        """Cancelled tasks never fire."""
        calls: list[str] = []
        coordinator = DebounceCoordinator(SETTLE)

        coordinator.schedule(lambda: calls.append("run"))
        assert coordinator.cancel()
        assert not coordinator.is_computing

        await asyncio.sleep(SETTLE * 5)
        assert calls == []
        assert not coordinator.cancel()

    @pytest.mark.asyncio
    async def test_flush_runs_now(self) -> None:
        """Flushing runs the pending task immediately and only once."""
        calls: list[str] = []
        coordinator = DebounceCoordinator(SETTLE)

        coordinator.schedule(lambda: calls.append("run"))
        assert coordinator.flush()
        assert calls == ["run"]
        assert not coordinator.is_computing

        await asyncio.sleep(SETTLE * 5)
        assert calls == ["run"]
        assert not coordinator.flush()

    @pytest.mark.asyncio
    async def test_dispose_cancels_and_rejects(self) -> None:
        """After dispose nothing fires and scheduling fails."""
        calls: list[str] = []
        coordinator = DebounceCoordinator(SETTLE)

        coordinator.schedule(lambda: calls.append("run"))
        coordinator.dispose()
        await asyncio.sleep(SETTLE * 5)

        assert calls == []
        assert coordinator.disposed
        with pytest.raises(CoordinatorDisposedError):
            coordinator.schedule(lambda: calls.append("late"))
        coordinator.dispose()

    @pytest.mark.asyncio
    async def test_failing_callback_clears_flag(self) -> None:
        """The computing flag clears even if the recompute raises."""
        coordinator = DebounceCoordinator(SETTLE)

        def boom() -> None:
            raise RuntimeError("boom")

        coordinator.schedule(boom)
        with pytest.raises(RuntimeError):
            coordinator.flush()
        assert not coordinator.is_computing

    @pytest.mark.asyncio
    async def test_callback_may_reschedule(self) -> None:
        """A follow-up scheduled from the callback keeps the flag set."""
        calls: list[str] = []
        coordinator = DebounceCoordinator(SETTLE)

        def first() -> None:
            calls.append("first")
            coordinator.schedule(lambda: calls.append("second"))

        coordinator.schedule(first)
        coordinator.flush()
        assert coordinator.is_computing

        await asyncio.sleep(SETTLE * 5)
        assert calls == ["first", "second"]
        assert not coordinator.is_computing

    def test_schedule_requires_loop(self) -> None:
        """Without an event loop there is nothing to schedule on."""
        coordinator = DebounceCoordinator(SETTLE)
        with pytest.raises(RuntimeError):
            coordinator.schedule(lambda: None)
        assert not coordinator.is_computing
