"""
Channel repository for database operations.
"""

import logging
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.models.channel import Channel

logger = logging.getLogger(__name__)


class ChannelRepository:
    """
    Repository for newsletter Channel operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_all_channels(self) -> Sequence[Channel]:
        """Get all channels in registration order."""
        result = await self.session.execute(select(Channel).order_by(Channel.id))
        return result.scalars().all()

    async def create_channel(self, channel_id: str) -> Channel:
        """Create a new channel."""
        channel = Channel(channel_id=channel_id)
        self.session.add(channel)
        await self.session.flush()
        await self.session.refresh(channel)
        return channel

    async def delete_channel(self, channel_pk: int) -> bool:
        """Delete a channel."""
        result = await self.session.execute(
            delete(Channel).where(Channel.id == channel_pk)
        )
        return result.rowcount > 0
