"""
Database models for Newsroom.
"""

from newsroom.models.article import Article, ArticleTranslation
from newsroom.models.base import Base, close_db, init_db
from newsroom.models.category import Category, CategoryTranslation
from newsroom.models.channel import Channel
from newsroom.models.language import Language

__all__ = [
    "Base",
    "Article",
    "ArticleTranslation",
    "Category",
    "CategoryTranslation",
    "Channel",
    "Language",
    "init_db",
    "close_db",
]
