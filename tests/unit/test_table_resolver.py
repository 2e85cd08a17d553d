"""
Unit tests for core/glossary/resolver.py — TableResolver.
"""

import pytest

from core.glossary import GlossaryUnavailable, TableFetchError, TableResolver


class TestCandidates:
    def test_unknown_language_single_candidate(self, make_store):
        resolver = TableResolver(make_store())
        assert resolver.candidates("Klingon") == ["Klingon"]

    def test_uses_injected_config(self, make_store, synthetic_config):
        resolver = TableResolver(make_store(), synthetic_config)
        assert resolver.candidates("Elvish") == ["Elvish terms", "ELV", "Quenya"]


class TestResolve:
    @pytest.mark.asyncio
    async def test_first_candidate_wins(self, make_store):
        store = make_store({"German translations": [{"English": "a"}], "German": []})
        table = await TableResolver(store).resolve("German")

        assert table.name == "German translations"
        assert store.calls == ["German translations"]

    @pytest.mark.asyncio
    async def test_tries_in_order_and_stops_at_first_success(self, make_store):
        store = make_store({"DE": [{"English": "Cancel", "German": "Abbrechen"}], "Deutsch": []})
        table = await TableResolver(store).resolve("German")

        assert table.name == "DE"
        assert store.calls == ["German translations", "German", "DE"]
        assert table.tried == ["German translations", "German", "DE"]
        assert len(table.records) == 1

    @pytest.mark.asyncio
    async def test_empty_table_is_accepted(self, make_store):
        store = make_store({"German translations": [], "German": [{"English": "x"}]})
        table = await TableResolver(store).resolve("German")

        assert table.name == "German translations"
        assert table.records == []
        assert store.calls == ["German translations"]

    @pytest.mark.asyncio
    async def test_fetch_errors_move_to_next_candidate(self, make_store):
        store = make_store(
            {"Deutsch": []},
            errors={"German": TableFetchError("German", "request failed: timeout")},
        )
        table = await TableResolver(store).resolve("German")
        assert table.name == "Deutsch"
        assert store.calls == ["German translations", "German", "DE", "Deutsch"]

    @pytest.mark.asyncio
    async def test_unknown_language_unavailable(self, make_store):
        store = make_store()
        with pytest.raises(GlossaryUnavailable) as exc_info:
            await TableResolver(store).resolve("Klingon")

        assert store.calls == ["Klingon"]
        assert exc_info.value.tried == ["Klingon"]
        assert "Klingon" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_all_candidates_fail(self, make_store):
        store = make_store()
        with pytest.raises(GlossaryUnavailable) as exc_info:
            await TableResolver(store).resolve("Finnish")

        assert exc_info.value.tried == ["Finnish translations", "Finnish", "FI", "Suomi"]
        assert store.calls == exc_info.value.tried

    @pytest.mark.asyncio
    async def test_unknown_language_found_by_literal_name(self, make_store):
        store = make_store({"Klingon": [{"English": "Cancel", "Klingon": "qIl"}]})
        table = await TableResolver(store).resolve("Klingon")
        assert table.name == "Klingon"
