"""Debounced recomputation.

Rapid facet changes (dragging a price slider, typing a search) each
reschedule one pending recompute instead of running it immediately.
Only the most recently scheduled recompute can fire; every earlier one
is cancelled when it is replaced. While a recompute is pending the
coordinator reports ``is_computing`` so the host can show a loader.
"""

import asyncio
from collections.abc import Callable

import structlog

from storefront.domain.exceptions import CoordinatorDisposedError

logger = structlog.get_logger()


class DebounceCoordinator:
    """Single-slot, cancellable delayed task on an asyncio event loop.

    Hosts must call dispose() on teardown so no recompute fires after
    the view is gone.

    Example usage:
        coordinator = DebounceCoordinator(delay=0.3)
        coordinator.schedule(browser.refresh)
        coordinator.schedule(browser.refresh)  # replaces the first one
        ...
        coordinator.dispose()
    """

    def __init__(
        self,
        delay: float,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        """Initialize coordinator.

        Args:
            delay: Settle delay in seconds.
            loop: Event loop to schedule on. Defaults to the running loop
                at the time of each schedule() call.
        """
        self.delay = delay
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None
        self._callback: Callable[[], None] | None = None
        self._is_computing = False
        self._disposed = False

    @property
    def is_computing(self) -> bool:
        """Check whether a recompute is pending."""
        return self._is_computing

    @property
    def pending(self) -> bool:
        """Check whether a scheduled task has not fired yet."""
        return self._handle is not None

    @property
    def disposed(self) -> bool:
        """Check whether dispose() has been called."""
        return self._disposed

    def schedule(self, callback: Callable[[], None]) -> None:
        """Schedule a recompute, replacing any pending one.

        Args:
            callback: Synchronous recompute to run after the settle delay.

        Raises:
            CoordinatorDisposedError: If the coordinator was disposed.
        """
        if self._disposed:
            raise CoordinatorDisposedError()

        loop = self._loop or asyncio.get_running_loop()
        replaced = self._cancel_pending()
        self._is_computing = True
        self._callback = callback
        self._handle = loop.call_later(self.delay, self._fire)
        logger.debug("Recompute scheduled", delay=self.delay, replaced_pending=replaced)

    def flush(self) -> bool:
        """Run the pending recompute now.

        Returns:
            True if a pending recompute was run.
        """
        if self._handle is None:
            return False
        self._handle.cancel()
        self._fire()
        return True

    def cancel(self) -> bool:
        """Drop the pending recompute without running it.

        Returns:
            True if a pending recompute was cancelled.
        """
        cancelled = self._cancel_pending()
        self._is_computing = False
        if cancelled:
            logger.debug("Pending recompute cancelled")
        return cancelled

    def dispose(self) -> None:
        """Cancel pending work and refuse any further scheduling."""
        if self._disposed:
            return
        self.cancel()
        self._disposed = True
        logger.debug("Debounce coordinator disposed")

    def _cancel_pending(self) -> bool:
        if self._handle is None:
            return False
        self._handle.cancel()
        self._handle = None
        self._callback = None
        return True

    def _fire(self) -> None:
        callback = self._callback
        self._handle = None
        self._callback = None
        try:
            if callback is not None and not self._disposed:
                callback()
        finally:
            # The callback may have scheduled a follow-up
            self._is_computing = self._handle is not None
