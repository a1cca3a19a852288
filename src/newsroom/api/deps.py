"""
FastAPI dependency injection.

Provides common dependencies for API routes.
"""

from typing import AsyncGenerator

from fastapi import Header, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.adapters.base import ChannelTransport
from newsroom.models.base import get_session_factory
from newsroom.services.content_query import AdminIdentity


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session for request.

    Usage:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    session_factory = get_session_factory()
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_current_admin(
    x_admin_id: str | None = Header(default=None),
) -> AdminIdentity:
    """
    Identity of the calling admin.

    Authentication happens upstream; the gateway forwards the admin id
    in the X-Admin-Id header.
    """
    # Only ASCII digits; int() rejects other Unicode digit characters
    if not x_admin_id or not (x_admin_id.isascii() and x_admin_id.isdigit()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return AdminIdentity(admin_id=int(x_admin_id))


def get_transport(request: Request) -> ChannelTransport:
    """Get the newsletter transport configured at startup."""
    transport = getattr(request.app.state, "transport", None)
    if transport is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Newsletter transport is not configured",
        )
    return transport
