"""Tests for the in-memory per-session history."""

from __future__ import annotations

from services.graphic_generator import generate
from services.graphic_history import GraphicHistory


class TestGraphicHistory:
    async def test_newest_first(self, history):
        first = generate("mesh", "#111111")
        second = generate("roadmap", "#222222")
        await history.add(first, "s1")
        await history.add(second, "s1")
        assert await history.list("s1") == [second, first]

    async def test_capped_per_session(self, history):
        for i in range(5):
            await history.add(generate(f"prompt {i}", "#fff"), "s1")
        graphics = await history.list("s1")
        assert [g.prompt for g in graphics] == ["prompt 4", "prompt 3", "prompt 2"]

    async def test_sessions_are_isolated(self, history):
        await history.add(generate("mesh", "#fff"), "a")
        assert await history.list("b") == []
        assert len(await history.list("a")) == 1

    async def test_expired_entries_dropped(self, history):
        await history.add(generate("mesh", "#fff"), "s1")
        await history.add(generate("funnel", "#fff"), "s1")
        history._sessions["s1"][1].stored_at -= 120
        graphics = await history.list("s1")
        assert [g.prompt for g in graphics] == ["funnel"]

    async def test_cleanup_expired(self, history):
        await history.add(generate("mesh", "#fff"), "s1")
        await history.add(generate("mesh", "#fff"), "s2")
        history._sessions["s1"][0].stored_at -= 120
        assert await history.cleanup_expired() == 1
        assert history.stats()["sessions"] == 1

    async def test_clear(self, history):
        await history.add(generate("mesh", "#fff"), "s1")
        await history.add(generate("mesh", "#fff"), "s1")
        assert await history.clear("s1") == 2
        assert await history.list("s1") == []
        assert await history.clear("missing") == 0

    def test_stats(self):
        history = GraphicHistory(ttl_seconds=10, max_entries=5)
        assert history.stats() == {
            "sessions": 0,
            "total_entries": 0,
            "max_entries": 5,
            "max_sessions": 1000,
            "ttl_seconds": 10,
        }

    async def test_session_count_is_capped(self):
        history = GraphicHistory(ttl_seconds=60, max_entries=3, max_sessions=100)
        graphic = generate("mesh", "#fff")
        for i in range(1000):
            await history.add(graphic, f"s{i}")
        assert history.stats()["sessions"] == 100
        assert await history.list("s0") == []
        assert await history.list("s999") == [graphic]

    async def test_least_recently_used_session_evicted(self):
        history = GraphicHistory(ttl_seconds=60, max_entries=3, max_sessions=2)
        await history.add(generate("mesh", "#fff"), "a")
        await history.add(generate("mesh", "#fff"), "b")
        await history.list("a")
        await history.add(generate("mesh", "#fff"), "c")
        assert len(await history.list("a")) == 1
        assert await history.list("b") == []
