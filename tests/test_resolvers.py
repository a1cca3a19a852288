"""Tests for language and category resolution."""

import pytest

from newsroom.exceptions import NotFoundError
from newsroom.services.category_resolver import CategoryResolver
from newsroom.services.language_resolver import LanguageResolver


class TestLanguageResolver:
    @pytest.mark.asyncio
    async def test_resolve_known_code(self, session, languages):
        resolver = LanguageResolver(session)
        assert await resolver.resolve("ru") == languages["ru"]

    @pytest.mark.asyncio
    async def test_resolve_unknown_code(self, session, languages):
        resolver = LanguageResolver(session)
        with pytest.raises(NotFoundError):
            await resolver.resolve("fr")

    @pytest.mark.asyncio
    async def test_exists_all(self, session, languages):
        resolver = LanguageResolver(session)
        assert await resolver.exists_all({languages["en"], languages["uz"]})
        assert await resolver.exists_all([languages["en"], languages["en"]])
        assert await resolver.exists_all(set())

    @pytest.mark.asyncio
    async def test_exists_all_rejects_any_unknown(self, session, languages):
        resolver = LanguageResolver(session)
        assert not await resolver.exists_all({languages["en"], 999})


class TestCategoryResolver:
    @pytest.mark.asyncio
    async def test_resolve_by_name_any_language(self, session, categories):
        resolver = CategoryResolver(session)
        assert await resolver.resolve_by_name("Sport") == categories["Sport"]
        assert await resolver.resolve_by_name("Спорт") == categories["Sport"]

    @pytest.mark.asyncio
    async def test_resolve_by_name_case_insensitive(self, session, categories):
        resolver = CategoryResolver(session)
        assert await resolver.resolve_by_name("politics") == categories["Politics"]

    @pytest.mark.asyncio
    async def test_resolve_by_name_unknown(self, session, categories):
        resolver = CategoryResolver(session)
        with pytest.raises(NotFoundError):
            await resolver.resolve_by_name("Weather")

    @pytest.mark.asyncio
    async def test_resolve_by_id_in_language(self, session, categories):
        resolver = CategoryResolver(session)
        assert await resolver.resolve_by_id(categories["Sport"], "ru") == "Спорт"
        assert await resolver.resolve_by_id(categories["Sport"]) == "Sport"

    @pytest.mark.asyncio
    async def test_resolve_by_id_falls_back_to_first_translation(self, session, categories):
        resolver = CategoryResolver(session)
        assert await resolver.resolve_by_id(categories["Politics"], "uz") == "Politics"
        assert await resolver.resolve_by_id(categories["Politics"], "xx") == "Politics"

    @pytest.mark.asyncio
    async def test_resolve_by_id_unknown(self, session, categories):
        resolver = CategoryResolver(session)
        with pytest.raises(NotFoundError):
            await resolver.resolve_by_id(999)

    @pytest.mark.asyncio
    async def test_exists(self, session, categories):
        resolver = CategoryResolver(session)
        assert await resolver.exists(categories["Sport"])
        assert not await resolver.exists(999)
