"""
Article repository for database operations.
"""

import logging
from typing import Any, Literal, Sequence

from sqlalchemy import Row, and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.models.article import Article, ArticleTranslation
from newsroom.models.category import CategoryTranslation

logger = logging.getLogger(__name__)

ArticleOrder = Literal["latest", "views"]


class ArticleRepository:
    """
    Repository for Article and ArticleTranslation operations.

    Read queries join an article to its translation in one language and
    to its category's name in the same language.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    # ===== Helpers =====

    @staticmethod
    def _translation_join(language_id: int):
        return and_(
            ArticleTranslation.article_id == Article.id,
            ArticleTranslation.language_id == language_id,
        )

    @staticmethod
    def _category_join(language_id: int):
        return and_(
            CategoryTranslation.category_id == Article.category_id,
            CategoryTranslation.language_id == language_id,
        )

    # ===== Article Operations =====

    async def get_article(self, article_id: int) -> Article | None:
        """Get an article by ID."""
        result = await self.session.execute(
            select(Article).where(Article.id == article_id)
        )
        return result.scalar_one_or_none()

    async def find_article_view(
        self,
        article_id: int,
        language_id: int,
    ) -> Row | None:
        """
        Load an article with its translation and category name.

        Returns:
            Row of (Article, ArticleTranslation, category_name) or None
            when the article has no translation in that language.
        """
        result = await self.session.execute(
            select(
                Article,
                ArticleTranslation,
                CategoryTranslation.name.label("category_name"),
            )
            .select_from(Article)
            .join(ArticleTranslation, self._translation_join(language_id))
            .outerjoin(CategoryTranslation, self._category_join(language_id))
            .where(Article.id == article_id)
            .execution_options(populate_existing=True)
        )
        return result.one_or_none()

    async def find_articles_page(
        self,
        language_id: int,
        limit: int,
        offset: int,
        order_by: ArticleOrder = "latest",
        category_id: int | None = None,
    ) -> tuple[Sequence[Row], int]:
        """
        Get one page of translated articles and the total count.

        Only articles with a translation in the given language are
        listed or counted.

        Args:
            language_id: Language to project titles and category names in
            limit: Page size
            offset: Rows to skip
            order_by: "latest" (newest first) or "views" (most viewed
                first, ties in insertion order)
            category_id: Restrict to one category

        Returns:
            Tuple of (rows, total) where each row is
            (Article, title, link, category_name)
        """
        conditions = []
        if category_id is not None:
            conditions.append(Article.category_id == category_id)

        if order_by == "views":
            ordering = (Article.views.desc(), Article.id.asc())
        else:
            ordering = (Article.created_at.desc(), Article.id.desc())

        result = await self.session.execute(
            select(
                Article,
                ArticleTranslation.title,
                ArticleTranslation.link,
                CategoryTranslation.name.label("category_name"),
            )
            .select_from(Article)
            .join(ArticleTranslation, self._translation_join(language_id))
            .outerjoin(CategoryTranslation, self._category_join(language_id))
            .where(*conditions)
            .order_by(*ordering)
            .limit(limit)
            .offset(offset)
        )
        rows = result.all()

        count_result = await self.session.execute(
            select(func.count(Article.id))
            .select_from(Article)
            .join(ArticleTranslation, self._translation_join(language_id))
            .where(*conditions)
        )
        return rows, count_result.scalar_one()

    async def find_admin_page(
        self,
        language_id: int,
        limit: int,
        offset: int,
    ) -> tuple[Sequence[Row], int]:
        """
        Get one page of articles for the admin listing, newest first.

        Returns:
            Tuple of (rows, total) where each row is
            (id, created_at, views, title)
        """
        result = await self.session.execute(
            select(
                Article.id,
                Article.created_at,
                Article.views,
                ArticleTranslation.title,
            )
            .select_from(Article)
            .join(ArticleTranslation, self._translation_join(language_id))
            .order_by(Article.created_at.desc(), Article.id.desc())
            .limit(limit)
            .offset(offset)
        )
        rows = result.all()

        count_result = await self.session.execute(
            select(func.count(Article.id))
            .select_from(Article)
            .join(ArticleTranslation, self._translation_join(language_id))
        )
        return rows, count_result.scalar_one()

    async def create_article(
        self,
        category_id: int,
        admin_id: int,
        poster_link: str,
        province: str,
        city: str,
    ) -> Article:
        """Create a new article without translations."""
        article = Article(
            category_id=category_id,
            admin_id=admin_id,
            poster_link=poster_link,
            province=province,
            city=city,
            views=0,
        )
        self.session.add(article)
        await self.session.flush()
        await self.session.refresh(article)
        return article

    async def create_translations_bulk(self, rows: list[dict[str, Any]]) -> None:
        """
        Insert all translations of an article in one statement.

        Args:
            rows: Dicts with keys article_id, language_id, title,
                description, content, link
        """
        if not rows:
            return
        await self.session.execute(insert(ArticleTranslation), rows)

    async def increment_views(self, article_id: int, language_id: int) -> bool:
        """
        Atomically add one view to an article.

        Only articles that have a translation in the given language are
        counted.

        Returns:
            True if a row was updated
        """
        has_translation = (
            select(ArticleTranslation.id)
            .where(
                ArticleTranslation.article_id == article_id,
                ArticleTranslation.language_id == language_id,
            )
            .exists()
        )
        result = await self.session.execute(
            update(Article)
            .where(Article.id == article_id, has_translation)
            .values(views=Article.views + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0

    async def delete_article(self, article_id: int) -> bool:
        """Delete an article row."""
        result = await self.session.execute(
            delete(Article).where(Article.id == article_id)
        )
        return result.rowcount > 0

    async def delete_translations(self, article_id: int) -> int:
        """
        Delete all translations of an article.

        Returns:
            Number of deleted translations
        """
        result = await self.session.execute(
            delete(ArticleTranslation).where(ArticleTranslation.article_id == article_id)
        )
        return result.rowcount
