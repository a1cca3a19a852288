"""
Service layer for business logic.
"""

from newsroom.services.category_resolver import CategoryResolver
from newsroom.services.channel_registry import ChannelRegistry
from newsroom.services.content_query import (
    AdminArticleSummary,
    AdminIdentity,
    ArticleDetail,
    ArticlePage,
    ArticleSummary,
    ContentQueryEngine,
)
from newsroom.services.language_resolver import LanguageResolver
from newsroom.services.newsletter import NewsletterBroadcaster, channel_destination

__all__ = [
    # Resolvers
    "LanguageResolver",
    "CategoryResolver",
    # Articles
    "ContentQueryEngine",
    "AdminIdentity",
    "ArticleDetail",
    "ArticleSummary",
    "AdminArticleSummary",
    "ArticlePage",
    # Newsletter
    "ChannelRegistry",
    "NewsletterBroadcaster",
    "channel_destination",
]
