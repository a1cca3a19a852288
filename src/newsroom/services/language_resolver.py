"""
Language resolution - maps language codes to ids.
"""

import logging
from typing import Collection

from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.exceptions import NotFoundError
from newsroom.repositories.language_repository import LanguageRepository

logger = logging.getLogger(__name__)


class LanguageResolver:
    """
    Lookup-only access to the language reference data.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.repo = LanguageRepository(session)

    async def resolve(self, code: str) -> int:
        """
        Resolve a language code to its id.

        Raises:
            NotFoundError: No language with that code is registered
        """
        language = await self.repo.get_language_by_code(code)
        if language is None:
            raise NotFoundError(f"Language '{code}' not found")
        return language.id

    async def exists_all(self, language_ids: Collection[int]) -> bool:
        """Check that every id in the batch belongs to a registered language."""
        unique_ids = set(language_ids)
        if not unique_ids:
            return True
        found = await self.repo.count_existing(unique_ids)
        return found == len(unique_ids)
