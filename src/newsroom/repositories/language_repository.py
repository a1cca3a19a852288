"""
Language repository for database operations.
"""

import logging
from typing import Collection

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.models.language import Language

logger = logging.getLogger(__name__)


class LanguageRepository:
    """
    Repository for Language lookups.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_language_by_code(self, code: str) -> Language | None:
        """Get a language by its short code."""
        result = await self.session.execute(
            select(Language).where(Language.code == code)
        )
        return result.scalar_one_or_none()

    async def count_existing(self, language_ids: Collection[int]) -> int:
        """Count how many of the given ids belong to existing languages."""
        if not language_ids:
            return 0
        result = await self.session.execute(
            select(func.count(Language.id)).where(Language.id.in_(language_ids))
        )
        return result.scalar_one()

    async def get_or_create_language(
        self,
        code: str,
        name: str | None = None,
    ) -> tuple[Language, bool]:
        """
        Get existing language or create new one.

        Returns:
            Tuple of (language, created)
        """
        existing = await self.get_language_by_code(code)
        if existing:
            return existing, False

        language = Language(code=code, name=name)
        self.session.add(language)
        await self.session.flush()
        logger.info(f"Registered language: {code}")
        return language, True
