"""
Repository layer for database operations.
"""

from newsroom.repositories.article_repository import ArticleRepository
from newsroom.repositories.category_repository import CategoryRepository
from newsroom.repositories.channel_repository import ChannelRepository
from newsroom.repositories.language_repository import LanguageRepository

__all__ = [
    "ArticleRepository",
    "CategoryRepository",
    "ChannelRepository",
    "LanguageRepository",
]
