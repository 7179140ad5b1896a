"""Debounced, last-write-wins food search."""

import asyncio
import contextlib
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum

from food_lookup.domain.foods import FoodRecord
from food_lookup.services.search import MIN_QUERY_LENGTH, normalize_text

DEFAULT_DEBOUNCE_SECONDS = 0.3

_logger = logging.getLogger(__name__)


class SearchState(Enum):
    """Lifecycle of a search controller."""

    IDLE = "idle"
    FETCHING = "fetching"


@dataclass
class SearchController:
    """Runs a search once typing has been quiet for ``debounce_seconds``.

    Each input bumps a generation counter; results from an older generation
    are dropped so a slow fetch can never overwrite a newer one.
    """

    search: Callable[[str], Awaitable[list[FoodRecord]]]
    on_results: Callable[[list[FoodRecord]], None] | None = None
    debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS
    state: SearchState = SearchState.IDLE
    results: list[FoodRecord] = field(default_factory=list)
    _generation: int = field(default=0, init=False, repr=False)
    _task: asyncio.Task[None] | None = field(default=None, init=False, repr=False)

    @property
    def generation(self) -> int:
        """Current request generation."""
        return self._generation

    def input_changed(self, term: str) -> None:
        """Handle a new search term, superseding any pending search."""
        self._cancel_task()
        self._generation += 1
        self.state = SearchState.IDLE
        if len(normalize_text(term)) < MIN_QUERY_LENGTH:
            self._publish([])
            return
        self._task = asyncio.get_running_loop().create_task(
            self._run(term, self._generation)
        )

    def cancel(self) -> None:
        """Abandon the pending or in-flight search."""
        self._cancel_task()
        self._generation += 1
        self.state = SearchState.IDLE

    async def wait(self) -> None:
        """Wait for the current search task, if any, to settle."""
        task = self._task
        if task is None:
            return
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _run(self, term: str, generation: int) -> None:
        await asyncio.sleep(self.debounce_seconds)
        if generation != self._generation:
            return
        self.state = SearchState.FETCHING
        try:
            results = await self.search(term)
        except Exception:
            _logger.exception("Food search failed: term=%s", term)
            results = []
        finally:
            if generation == self._generation:
                self.state = SearchState.IDLE
        if generation != self._generation:
            _logger.debug("Discarding stale search results: term=%s", term)
            return
        self._publish(results)

    def _publish(self, results: list[FoodRecord]) -> None:
        self.results = results
        if self.on_results is not None:
            self.on_results(results)

    def _cancel_task(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
