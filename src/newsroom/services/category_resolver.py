"""
Category resolution - maps category names to ids and back.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.exceptions import NotFoundError
from newsroom.repositories.category_repository import CategoryRepository
from newsroom.repositories.language_repository import LanguageRepository

logger = logging.getLogger(__name__)


class CategoryResolver:
    """
    Lookups over categories and their per-language names.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.repo = CategoryRepository(session)
        self.language_repo = LanguageRepository(session)

    async def resolve_by_name(self, name: str) -> int:
        """
        Resolve a category name, in any language, to its id.

        Raises:
            NotFoundError: No category has that name
        """
        category_id = await self.repo.find_category_id_by_name(name)
        if category_id is None:
            raise NotFoundError(f"Category '{name}' not found")
        return category_id

    async def resolve_by_id(self, category_id: int, language_code: str = "en") -> str:
        """
        Get the display name of a category.

        Prefers the name in the requested language and falls back to the
        oldest translation.

        Raises:
            NotFoundError: The category does not exist or has no names
        """
        translations = await self.repo.get_translations(category_id)
        if not translations:
            raise NotFoundError(f"Category {category_id} not found")

        language = await self.language_repo.get_language_by_code(language_code)
        if language is not None:
            for translation in translations:
                if translation.language_id == language.id:
                    return translation.name

        return translations[0].name

    async def exists(self, category_id: int) -> bool:
        """Check whether a category exists."""
        return await self.repo.get_category_by_id(category_id) is not None
