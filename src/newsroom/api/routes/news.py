"""
News API endpoints.

Public reads are projected into the requested language; writes require
an admin identity.
"""

from datetime import datetime

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.api.deps import get_current_admin, get_db
from newsroom.schemas import ArticleCreate
from newsroom.services.content_query import AdminIdentity, ContentQueryEngine

router = APIRouter()


# ===== Response Models =====


class ArticleDetailResponse(BaseModel):
    """Response model for a single article."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    category_id: int
    category_name: str | None
    poster_link: str
    province: str
    city: str
    views: int
    created_at: datetime
    title: str
    description: str
    content: str
    link: str


class ArticleSummaryResponse(BaseModel):
    """Response model for a listed article."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    category_id: int
    category_name: str | None
    poster_link: str
    views: int
    created_at: datetime
    title: str
    link: str


class ArticleListResponse(BaseModel):
    """Response model for a page of articles."""

    model_config = ConfigDict(from_attributes=True)

    items: list[ArticleSummaryResponse]
    total: int
    page: int
    pages: int
    category_name: str | None = None


class AdminArticleResponse(BaseModel):
    """Response model for an admin listing entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    views: int
    created_at: datetime


class AdminArticleListResponse(BaseModel):
    """Response model for the admin listing."""

    model_config = ConfigDict(from_attributes=True)

    items: list[AdminArticleResponse]
    total: int
    page: int
    pages: int


class ArticleCreatedResponse(BaseModel):
    """Response model for a created article."""

    id: int
    message: str


class MessageResponse(BaseModel):
    """Generic message response."""

    message: str


# ===== Endpoints =====


@router.get("/filter", response_model=ArticleListResponse)
async def list_by_filter(
    search: str | None = None,
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    language_code: str | None = None,
    db: AsyncSession = Depends(get_db),
) -> ArticleListResponse:
    """
    List articles of a category, or the latest articles.

    Args:
        search: Category name, or "latest"
    """
    engine = ContentQueryEngine(db)
    result = await engine.list_by_filter(search, page, limit, language_code)
    return ArticleListResponse.model_validate(result)


@router.get("/recommended", response_model=ArticleListResponse)
async def list_recommended(
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    language_code: str | None = None,
    db: AsyncSession = Depends(get_db),
) -> ArticleListResponse:
    """List the most viewed articles."""
    engine = ContentQueryEngine(db)
    result = await engine.list_recommended(page, limit, language_code)
    return ArticleListResponse.model_validate(result)


@router.get("/admin", response_model=AdminArticleListResponse)
async def list_for_admin(
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    admin: AdminIdentity = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> AdminArticleListResponse:
    """List all articles with their English titles."""
    engine = ContentQueryEngine(db)
    result = await engine.list_for_admin(page, limit)
    return AdminArticleListResponse.model_validate(result)


@router.get("/{article_id}", response_model=ArticleDetailResponse)
async def get_article(
    article_id: int,
    language_code: str = "en",
    db: AsyncSession = Depends(get_db),
) -> ArticleDetailResponse:
    """Get an article in one language. Counts as a view."""
    engine = ContentQueryEngine(db)
    article = await engine.fetch_by_id(article_id, language_code)
    return ArticleDetailResponse.model_validate(article)


@router.post("", response_model=ArticleCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    admin: AdminIdentity = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> ArticleCreatedResponse:
    """Create an article with its translations."""
    engine = ContentQueryEngine(db)
    article = await engine.create(data, admin)
    return ArticleCreatedResponse(id=article.id, message="Article created successfully")


@router.delete("/{article_id}", response_model=MessageResponse)
async def delete_article(
    article_id: int,
    admin: AdminIdentity = Depends(get_current_admin),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Delete an article and all its translations."""
    engine = ContentQueryEngine(db)
    await engine.delete(article_id)
    return MessageResponse(message=f"Article {article_id} deleted successfully")
