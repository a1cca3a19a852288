"""
Newsletter channel management API endpoints.
"""

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.api.deps import get_current_admin, get_db
from newsroom.api.routes.news import MessageResponse
from newsroom.schemas import ChannelCreate
from newsroom.services.channel_registry import ChannelRegistry

router = APIRouter(dependencies=[Depends(get_current_admin)])


class ChannelResponse(BaseModel):
    """Response model for a channel."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    channel_id: str


class ChannelListResponse(BaseModel):
    """Response model for channel list."""

    channels: list[ChannelResponse]
    total: int


@router.get("", response_model=ChannelListResponse)
async def list_channels(
    db: AsyncSession = Depends(get_db),
) -> ChannelListResponse:
    """List all newsletter channels."""
    registry = ChannelRegistry(db)
    channels = await registry.list()
    return ChannelListResponse(
        channels=[ChannelResponse.model_validate(c) for c in channels],
        total=len(channels),
    )


@router.post("", response_model=ChannelResponse, status_code=status.HTTP_201_CREATED)
async def add_channel(
    data: ChannelCreate,
    db: AsyncSession = Depends(get_db),
) -> ChannelResponse:
    """Register a newsletter channel."""
    registry = ChannelRegistry(db)
    channel = await registry.add(data.channel_id)
    return ChannelResponse.model_validate(channel)


@router.delete("/{channel_pk}", response_model=MessageResponse)
async def delete_channel(
    channel_pk: int,
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """Remove a newsletter channel."""
    registry = ChannelRegistry(db)
    await registry.remove(channel_pk)
    return MessageResponse(message=f"Channel {channel_pk} deleted successfully")
