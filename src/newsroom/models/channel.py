"""
Channel model for newsletter subscriptions.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from newsroom.models.base import Base


class Channel(Base):
    """
    External channel subscribed to newsletter broadcasts.

    channel_id is the positive numeric id of a Telegram supergroup or
    channel, stored without the leading minus sign.
    """

    __tablename__ = "channels"

    channel_id: Mapped[str] = mapped_column(String(64), nullable=False)

    def __repr__(self) -> str:
        return f"<Channel(id={self.id}, channel_id='{self.channel_id}')>"
