"""Shared test fixtures for Newsroom."""

import asyncio

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine

from newsroom.adapters.base import ChannelTransport
from newsroom.models.base import create_session_factory, init_db
from newsroom.repositories.category_repository import CategoryRepository
from newsroom.repositories.channel_repository import ChannelRepository
from newsroom.repositories.language_repository import LanguageRepository
from newsroom.schemas import ArticleCreate, ArticleTranslationCreate
from newsroom.services.content_query import AdminIdentity, ContentQueryEngine


class RecordingTransport(ChannelTransport):
    """Transport that records deliveries and fails on demand."""

    def __init__(self, fail_for: set[str] | None = None, hang_for: set[str] | None = None) -> None:
        self.fail_for = fail_for or set()
        self.hang_for = hang_for or set()
        self.sent: list[dict] = []
        self.attempted: list[str] = []

    @property
    def platform_name(self) -> str:
        return "recording"

    async def send(self, destination, text, action_label, action_url, format_mode) -> None:
        self.attempted.append(destination)
        if destination in self.hang_for:
            await asyncio.sleep(60)
        if destination in self.fail_for:
            raise RuntimeError(f"chat {destination} not found")
        self.sent.append(
            {
                "destination": destination,
                "text": text,
                "action_label": action_label,
                "action_url": action_url,
                "format_mode": format_mode,
            }
        )


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Async engine on a temporary SQLite file with all tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'newsroom.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def languages(session_factory) -> dict[str, int]:
    """Register en, ru and uz; returns code -> id."""
    async with session_factory() as session:
        repo = LanguageRepository(session)
        ids = {}
        for code in ("en", "ru", "uz"):
            language, _ = await repo.get_or_create_language(code)
            ids[code] = language.id
        await session.commit()
    return ids


@pytest_asyncio.fixture
async def categories(session_factory, languages) -> dict[str, int]:
    """Sport (en+ru) and Politics (en only); returns English name -> id."""
    async with session_factory() as session:
        repo = CategoryRepository(session)
        sport = await repo.create_category(
            {languages["en"]: "Sport", languages["ru"]: "Спорт"}
        )
        politics = await repo.create_category({languages["en"]: "Politics"})
        await session.commit()
        return {"Sport": sport.id, "Politics": politics.id}


@pytest.fixture
def admin() -> AdminIdentity:
    return AdminIdentity(admin_id=7)


@pytest.fixture
def make_article_input():
    """Build an ArticleCreate from (language_id, title) pairs."""

    def _make(category_id: int, translations: list[tuple[int, str]], /, **overrides) -> ArticleCreate:
        data = {
            "category_id": category_id,
            "poster_link": "posters/1.jpg",
            "province": "Tashkent",
            "city": "Tashkent",
            "translations": [
                ArticleTranslationCreate(
                    language_id=language_id,
                    title=title,
                    description=f"About {title}",
                    content=f"Body of {title}",
                )
                for language_id, title in translations
            ],
        }
        data.update(overrides)
        return ArticleCreate(**data)

    return _make


@pytest.fixture
def create_article(session_factory, admin, make_article_input):
    """Create and commit an article; returns its id."""

    async def _create(category_id: int, translations: list[tuple[int, str]]) -> int:
        async with session_factory() as session:
            query_engine = ContentQueryEngine(session)
            article = await query_engine.create(make_article_input(category_id, translations), admin)
            await session.commit()
            return article.id

    return _create


@pytest.fixture
def add_channels(session_factory):
    """Register channels by numeric id."""

    async def _add(*channel_ids: str) -> None:
        async with session_factory() as session:
            repo = ChannelRepository(session)
            for channel_id in channel_ids:
                await repo.create_channel(channel_id)
            await session.commit()

    return _add
