"""
Article and ArticleTranslation models.
"""

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from newsroom.models.base import Base


class Article(Base):
    """
    A published news article.

    Language-neutral fields only; titles and bodies live in
    ArticleTranslation, one row per language.
    """

    __tablename__ = "articles"

    category_id: Mapped[int] = mapped_column(ForeignKey("categories.id"))

    # Admin who created the article
    admin_id: Mapped[int] = mapped_column(nullable=False)

    poster_link: Mapped[str] = mapped_column(String(100), nullable=False)
    province: Mapped[str] = mapped_column(String(50), nullable=False)
    city: Mapped[str] = mapped_column(String(50), nullable=False)

    # Only ever changed by an atomic increment
    views: Mapped[int] = mapped_column(default=0, nullable=False)

    __table_args__ = (
        Index("ix_articles_created_at", "created_at"),
        Index("ix_articles_views", "views"),
        Index("ix_articles_category", "category_id"),
    )

    def __repr__(self) -> str:
        return f"<Article(id={self.id}, category_id={self.category_id}, views={self.views})>"


class ArticleTranslation(Base):
    """Per-language rendering of an article."""

    __tablename__ = "article_translations"

    article_id: Mapped[int] = mapped_column(
        ForeignKey("articles.id", ondelete="CASCADE")
    )
    language_id: Mapped[int] = mapped_column(ForeignKey("languages.id"))

    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(250), nullable=False)
    # Stored escaped, see newsroom.core.content_processor.escape_json_string
    content: Mapped[str] = mapped_column(Text, nullable=False)
    link: Mapped[str] = mapped_column(String(128), nullable=False)

    __table_args__ = (
        Index(
            "ix_article_translations_article_language",
            "article_id",
            "language_id",
            unique=True,
        ),
    )

    def __repr__(self) -> str:
        return f"<ArticleTranslation(id={self.id}, title='{self.title[:30]}...')>"
