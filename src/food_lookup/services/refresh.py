"""Event triggers and guarded data refreshes for meal-logging screens."""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum

DEFAULT_MIN_REFETCH_INTERVAL_SECONDS = 2.0

_logger = logging.getLogger(__name__)

Handler = Callable[[], Awaitable[object]]


class TriggerEvent(Enum):
    """Events that can prompt a screen to refresh its data."""

    NAVIGATE = "navigate"
    VISIBLE = "visible"
    FOCUS = "focus"
    INPUT_CHANGED = "input_changed"


@dataclass
class EventTriggers:
    """Registry of cancellable callbacks keyed by trigger event."""

    _handlers: dict[TriggerEvent, list[Handler]] = field(
        default_factory=dict, init=False, repr=False
    )

    def register(self, event: TriggerEvent, handler: Handler) -> Callable[[], None]:
        """Register a handler and return a callable that unregisters it."""
        self._handlers.setdefault(event, []).append(handler)

        def unregister() -> None:
            handlers = self._handlers.get(event, [])
            if handler in handlers:
                handlers.remove(handler)

        return unregister

    async def emit(self, event: TriggerEvent) -> None:
        """Run every handler registered for an event, in order."""
        for handler in list(self._handlers.get(event, [])):
            await handler()


@dataclass
class DataRefresher:
    """Single-flight data refresh with a minimum interval between triggers.

    Initial loads (navigation) bypass the interval; visibility and focus
    triggers are skipped when the last fetch started too recently.
    """

    fetch: Callable[[], Awaitable[None]]
    user_id: str | None
    min_interval_seconds: float = DEFAULT_MIN_REFETCH_INTERVAL_SECONDS
    clock: Callable[[], float] = time.monotonic
    is_initial_loading: bool = True
    _is_fetching: bool = field(default=False, init=False, repr=False)
    _has_loaded: bool = field(default=False, init=False, repr=False)
    _last_fetch_at: float | None = field(default=None, init=False, repr=False)

    @property
    def is_fetching(self) -> bool:
        """Whether a fetch is currently running."""
        return self._is_fetching

    async def refresh(self, *, initial: bool = False) -> bool:
        """Run the fetch unless a guard skips it. Returns whether it ran."""
        if not self.user_id:
            self.is_initial_loading = False
            return False
        if self._is_fetching:
            return False
        now = self.clock()
        if (
            not initial
            and self._last_fetch_at is not None
            and now - self._last_fetch_at < self.min_interval_seconds
        ):
            _logger.debug(
                "Refresh skipped: last fetch %.2fs ago", now - self._last_fetch_at
            )
            return False

        self._is_fetching = True
        self._last_fetch_at = now
        if not self._has_loaded:
            self.is_initial_loading = True
        try:
            await self.fetch()
        finally:
            self._is_fetching = False
            if not self._has_loaded:
                self._has_loaded = True
                self.is_initial_loading = False
        return True

    def bind(self, triggers: EventTriggers) -> Callable[[], None]:
        """Subscribe to navigation, visibility and focus triggers."""

        async def on_navigate() -> bool:
            return await self.refresh(initial=True)

        async def on_resume() -> bool:
            return await self.refresh()

        unregisters = [
            triggers.register(TriggerEvent.NAVIGATE, on_navigate),
            triggers.register(TriggerEvent.VISIBLE, on_resume),
            triggers.register(TriggerEvent.FOCUS, on_resume),
        ]

        def unbind() -> None:
            for unregister in unregisters:
                unregister()

        return unbind
