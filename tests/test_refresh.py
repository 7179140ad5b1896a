"""Tests for event triggers and guarded refreshes."""

import asyncio

import pytest

from food_lookup.services.refresh import DataRefresher, EventTriggers, TriggerEvent


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


def _refresher(
    calls: list[str], clock: FakeClock, user_id: str | None = "user-1"
) -> DataRefresher:
    async def fetch() -> None:
        calls.append("fetch")

    return DataRefresher(fetch=fetch, user_id=user_id, clock=clock)


def test_refresh_without_user_is_skipped() -> None:
    calls: list[str] = []
    refresher = _refresher(calls, FakeClock(), user_id=None)

    assert asyncio.run(refresher.refresh(initial=True)) is False
    assert calls == []
    assert refresher.is_initial_loading is False


def test_initial_refresh_clears_loading_flag() -> None:
    calls: list[str] = []
    refresher = _refresher(calls, FakeClock())

    assert refresher.is_initial_loading is True
    assert asyncio.run(refresher.refresh(initial=True)) is True
    assert calls == ["fetch"]
    assert refresher.is_initial_loading is False


def test_refresh_respects_minimum_interval() -> None:
    calls: list[str] = []
    clock = FakeClock()
    refresher = _refresher(calls, clock)

    asyncio.run(refresher.refresh(initial=True))
    clock.now += 1.0
    assert asyncio.run(refresher.refresh()) is False
    assert asyncio.run(refresher.refresh(initial=True)) is True
    clock.now += 2.5
    assert asyncio.run(refresher.refresh()) is True
    assert calls == ["fetch", "fetch", "fetch"]


def test_refresh_is_single_flight() -> None:
    async def scenario() -> tuple[bool, bool, int]:
        gate = asyncio.Event()
        calls: list[str] = []

        async def fetch() -> None:
            calls.append("fetch")
            await gate.wait()

        refresher = DataRefresher(fetch=fetch, user_id="user-1", clock=FakeClock())
        first = asyncio.create_task(refresher.refresh(initial=True))
        await asyncio.sleep(0)
        assert refresher.is_fetching is True
        second = await refresher.refresh(initial=True)
        gate.set()
        return await first, second, len(calls)

    first, second, call_count = asyncio.run(scenario())

    assert first is True
    assert second is False
    assert call_count == 1


def test_refresh_failure_propagates_and_releases_flight() -> None:
    attempts: list[str] = []

    async def fetch() -> None:
        attempts.append("fetch")
        if len(attempts) == 1:
            raise RuntimeError("network down")

    refresher = DataRefresher(fetch=fetch, user_id="user-1", clock=FakeClock())

    with pytest.raises(RuntimeError):
        asyncio.run(refresher.refresh(initial=True))

    assert refresher.is_fetching is False
    assert refresher.is_initial_loading is False
    assert asyncio.run(refresher.refresh(initial=True)) is True
    assert attempts == ["fetch", "fetch"]


def test_bind_wires_navigation_visibility_and_focus() -> None:
    calls: list[str] = []
    clock = FakeClock()
    refresher = _refresher(calls, clock)
    triggers = EventTriggers()
    unbind = refresher.bind(triggers)

    asyncio.run(triggers.emit(TriggerEvent.NAVIGATE))
    asyncio.run(triggers.emit(TriggerEvent.FOCUS))
    assert calls == ["fetch"]

    clock.now += 3.0
    asyncio.run(triggers.emit(TriggerEvent.VISIBLE))
    assert calls == ["fetch", "fetch"]

    unbind()
    clock.now += 3.0
    asyncio.run(triggers.emit(TriggerEvent.NAVIGATE))
    asyncio.run(triggers.emit(TriggerEvent.FOCUS))
    assert calls == ["fetch", "fetch"]


def test_unregister_is_idempotent() -> None:
    calls: list[str] = []
    triggers = EventTriggers()

    async def handler() -> None:
        calls.append("input")

    unregister = triggers.register(TriggerEvent.INPUT_CHANGED, handler)
    asyncio.run(triggers.emit(TriggerEvent.INPUT_CHANGED))
    unregister()
    unregister()
    asyncio.run(triggers.emit(TriggerEvent.INPUT_CHANGED))

    assert calls == ["input"]
