"""
Content query engine - Business logic for multilingual articles.

Every read projects an article into a single language: the article's
translation in that language plus its category's name in the same
language.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.config import get_settings
from newsroom.core.content_processor import escape_json_string, format_link
from newsroom.core.pagination import Pagination
from newsroom.exceptions import InvalidReferenceError, NotFoundError
from newsroom.models.article import Article
from newsroom.repositories.article_repository import ArticleRepository
from newsroom.schemas import ArticleCreate
from newsroom.services.category_resolver import CategoryResolver
from newsroom.services.language_resolver import LanguageResolver

logger = logging.getLogger(__name__)

# Search token meaning "no category filter, newest first"
LATEST = "latest"

# Admin listing always shows English titles
ADMIN_LANGUAGE = "en"


@dataclass
class AdminIdentity:
    """Authenticated admin performing a write."""
    admin_id: int


@dataclass
class ArticleDetail:
    """A single article projected into one language."""
    id: int
    category_id: int
    category_name: str | None
    poster_link: str
    province: str
    city: str
    views: int
    created_at: datetime
    title: str
    description: str
    content: str
    link: str


@dataclass
class ArticleSummary:
    """Listing entry for public pages."""
    id: int
    category_id: int
    category_name: str | None
    poster_link: str
    views: int
    created_at: datetime
    title: str
    link: str


@dataclass
class AdminArticleSummary:
    """Listing entry for the admin page."""
    id: int
    title: str
    views: int
    created_at: datetime


@dataclass
class ArticlePage:
    """One page of a listing."""
    items: list[Any] = field(default_factory=list)
    total: int = 0
    page: int = 1
    pages: int = 0
    category_name: str | None = None


class ContentQueryEngine:
    """
    Service for reading and writing articles with their translations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.repo = ArticleRepository(session)
        self.languages = LanguageResolver(session)
        self.categories = CategoryResolver(session)
        self.settings = get_settings()

    def _paginate(self, page: int | None, limit: int | None) -> Pagination:
        return Pagination.from_params(page, limit, self.settings.default_page_size)

    async def fetch_by_id(self, article_id: int, language_code: str) -> ArticleDetail:
        """
        Fetch an article in one language and count the view.

        The view counter is incremented atomically, exactly once per
        successful fetch.

        Raises:
            NotFoundError: Unknown language, or no article with a
                translation in that language
        """
        language_id = await self.languages.resolve(language_code)

        if not await self.repo.increment_views(article_id, language_id):
            raise NotFoundError(f"Article {article_id} not found")

        row = await self.repo.find_article_view(article_id, language_id)
        if row is None:
            raise NotFoundError(f"Article {article_id} not found")

        article, translation, category_name = row
        return ArticleDetail(
            id=article.id,
            category_id=article.category_id,
            category_name=category_name,
            poster_link=article.poster_link,
            province=article.province,
            city=article.city,
            views=article.views,
            created_at=article.created_at,
            title=translation.title,
            description=translation.description,
            content=translation.content,
            link=translation.link,
        )

    async def create(self, data: ArticleCreate, identity: AdminIdentity) -> Article:
        """
        Create an article with all its translations.

        All references are validated before anything is written, so a
        rejected request leaves no partial article behind.

        Args:
            data: Validated article input
            identity: Admin creating the article

        Returns:
            The created Article

        Raises:
            InvalidReferenceError: Unknown category or language id
        """
        if not await self.categories.exists(data.category_id):
            raise InvalidReferenceError(f"Category {data.category_id} does not exist")

        language_ids = {t.language_id for t in data.translations}
        if not await self.languages.exists_all(language_ids):
            raise InvalidReferenceError("Language does not exist")

        article = await self.repo.create_article(
            category_id=data.category_id,
            admin_id=identity.admin_id,
            poster_link=data.poster_link,
            province=data.province,
            city=data.city,
        )

        rows = [
            {
                "article_id": article.id,
                "language_id": t.language_id,
                "title": t.title,
                "description": t.description,
                "content": escape_json_string(t.content),
                "link": t.link or format_link(t.title, article.id),
            }
            for t in data.translations
        ]
        await self.repo.create_translations_bulk(rows)

        logger.info(
            f"Article {article.id} created by admin {identity.admin_id} "
            f"with {len(rows)} translations"
        )
        return article

    async def list_for_admin(
        self,
        page: int | None = None,
        limit: int | None = None,
    ) -> ArticlePage:
        """List articles newest first with their English titles."""
        pagination = self._paginate(page, limit)
        language_id = await self.languages.resolve(ADMIN_LANGUAGE)

        rows, total = await self.repo.find_admin_page(
            language_id, pagination.limit, pagination.offset
        )
        items = [
            AdminArticleSummary(
                id=row.id,
                title=row.title,
                views=row.views,
                created_at=row.created_at,
            )
            for row in rows
        ]
        return ArticlePage(
            items=items,
            total=total,
            page=pagination.page,
            pages=pagination.count_pages(total),
        )

    async def list_by_filter(
        self,
        search: str | None = None,
        page: int | None = None,
        limit: int | None = None,
        language_code: str | None = None,
    ) -> ArticlePage:
        """
        List articles in one category, or the latest articles.

        Args:
            search: Category name, or "latest"/None for all categories
            page: 1-based page number
            limit: Page size
            language_code: Projection language, defaults to "en"

        Raises:
            NotFoundError: Unknown language or category
        """
        pagination = self._paginate(page, limit)
        language_code = language_code or self.settings.default_language
        language_id = await self.languages.resolve(language_code)

        if not search or search == LATEST:
            category_id = None
            category_name = LATEST
        else:
            category_id = await self.categories.resolve_by_name(search)
            category_name = await self.categories.resolve_by_id(category_id, language_code)

        rows, total = await self.repo.find_articles_page(
            language_id,
            pagination.limit,
            pagination.offset,
            order_by="latest",
            category_id=category_id,
        )
        return ArticlePage(
            items=[self._to_summary(row) for row in rows],
            total=total,
            page=pagination.page,
            pages=pagination.count_pages(total),
            category_name=category_name,
        )

    async def list_recommended(
        self,
        page: int | None = None,
        limit: int | None = None,
        language_code: str | None = None,
    ) -> ArticlePage:
        """List the most viewed articles, ties in creation order."""
        pagination = self._paginate(page, limit)
        language_code = language_code or self.settings.default_language
        language_id = await self.languages.resolve(language_code)

        rows, total = await self.repo.find_articles_page(
            language_id,
            pagination.limit,
            pagination.offset,
            order_by="views",
        )
        return ArticlePage(
            items=[self._to_summary(row) for row in rows],
            total=total,
            page=pagination.page,
            pages=pagination.count_pages(total),
        )

    async def delete(self, article_id: int) -> None:
        """
        Delete an article and its translations.

        The article row goes first so no fetch can count a view on an
        article whose translations are being removed.

        Raises:
            NotFoundError: No article with that id
        """
        deleted = await self.repo.delete_article(article_id)
        if not deleted:
            raise NotFoundError(f"Article {article_id} not found")

        removed = await self.repo.delete_translations(article_id)
        logger.info(f"Article {article_id} deleted with {removed} translations")

    @staticmethod
    def _to_summary(row: Any) -> ArticleSummary:
        article, title, link, category_name = row
        return ArticleSummary(
            id=article.id,
            category_id=article.category_id,
            category_name=category_name,
            poster_link=article.poster_link,
            views=article.views,
            created_at=article.created_at,
            title=title,
            link=link,
        )
