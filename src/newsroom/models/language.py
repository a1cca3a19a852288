"""
Language reference data.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from newsroom.models.base import Base


class Language(Base):
    """A language that articles and categories can be translated into."""

    __tablename__ = "languages"

    # Short stable code, e.g. "en"
    code: Mapped[str] = mapped_column(String(10), unique=True, nullable=False)
    name: Mapped[str | None] = mapped_column(String(64))

    def __repr__(self) -> str:
        return f"<Language(id={self.id}, code='{self.code}')>"
