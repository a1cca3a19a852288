"""
Category and CategoryTranslation models.
"""

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from newsroom.models.base import Base


class Category(Base):
    """
    News category.

    Carries no text of its own; display names live in CategoryTranslation.
    """

    __tablename__ = "categories"

    def __repr__(self) -> str:
        return f"<Category(id={self.id})>"


class CategoryTranslation(Base):
    """Per-language display name of a category."""

    __tablename__ = "category_translations"

    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="CASCADE")
    )
    language_id: Mapped[int] = mapped_column(ForeignKey("languages.id"))
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    __table_args__ = (
        # One translation per language
        Index(
            "ix_category_translations_category_language",
            "category_id",
            "language_id",
            unique=True,
        ),
        Index("ix_category_translations_name", "name"),
    )

    def __repr__(self) -> str:
        return (
            f"<CategoryTranslation(category_id={self.category_id}, "
            f"language_id={self.language_id}, name='{self.name}')>"
        )
