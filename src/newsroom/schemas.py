"""
Input models shared by the services and the API.

Shape validation lives here; existence of referenced rows is checked by
the services.
"""

from pydantic import BaseModel, Field, field_validator


class ArticleTranslationCreate(BaseModel):
    """One language version of a new article."""

    language_id: int
    title: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=250)
    content: str = Field(min_length=1, max_length=5000)
    link: str | None = Field(default=None, min_length=1, max_length=100)


class ArticleCreate(BaseModel):
    """Request model for creating an article."""

    category_id: int
    poster_link: str = Field(min_length=1, max_length=100)
    province: str = Field(min_length=1, max_length=50)
    city: str = Field(min_length=1, max_length=50)
    translations: list[ArticleTranslationCreate] = Field(min_length=1)

    @field_validator("translations")
    @classmethod
    def validate_unique_languages(
        cls, v: list[ArticleTranslationCreate]
    ) -> list[ArticleTranslationCreate]:
        language_ids = [t.language_id for t in v]
        if len(set(language_ids)) != len(language_ids):
            raise ValueError("only one translation per language is allowed")
        return v


class ChannelCreate(BaseModel):
    """Request model for registering a newsletter channel."""

    channel_id: str = Field(pattern=r"^[1-9][0-9]*$", max_length=64)


class NewsletterRequest(BaseModel):
    """Request model for broadcasting a newsletter."""

    text: str = Field(min_length=1, max_length=4096)
    link: str = Field(min_length=1, max_length=2048)
