"""
Category repository for database operations.
"""

import logging
from typing import Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.models.category import Category, CategoryTranslation

logger = logging.getLogger(__name__)


class CategoryRepository:
    """
    Repository for Category and CategoryTranslation operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_category_by_id(self, category_id: int) -> Category | None:
        """Get a category by ID."""
        result = await self.session.execute(
            select(Category).where(Category.id == category_id)
        )
        return result.scalar_one_or_none()

    async def find_category_id_by_name(self, name: str) -> int | None:
        """
        Find the category whose name, in any language, matches.

        Exact matches always count; case-insensitive matching follows the
        database's lower() (ASCII-only on SQLite). The oldest translation wins.
        """
        result = await self.session.execute(
            select(CategoryTranslation.category_id)
            .where(
                or_(
                    CategoryTranslation.name == name,
                    func.lower(CategoryTranslation.name) == name.lower(),
                )
            )
            .order_by(CategoryTranslation.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_translations(
        self,
        category_id: int,
    ) -> Sequence[CategoryTranslation]:
        """Get all translations of a category, oldest first."""
        result = await self.session.execute(
            select(CategoryTranslation)
            .where(CategoryTranslation.category_id == category_id)
            .order_by(CategoryTranslation.id)
        )
        return result.scalars().all()

    async def create_category(self, names: dict[int, str]) -> Category:
        """
        Create a category with its translations.

        Args:
            names: Mapping of language id to display name
        """
        category = Category()
        self.session.add(category)
        await self.session.flush()

        self.session.add_all(
            CategoryTranslation(
                category_id=category.id,
                language_id=language_id,
                name=name,
            )
            for language_id, name in names.items()
        )
        await self.session.flush()
        return category
