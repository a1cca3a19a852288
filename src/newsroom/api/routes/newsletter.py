"""
Newsletter API endpoint.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.adapters.base import ChannelTransport
from newsroom.api.deps import get_current_admin, get_db, get_transport
from newsroom.api.routes.news import MessageResponse
from newsroom.schemas import NewsletterRequest
from newsroom.services.newsletter import NewsletterBroadcaster

router = APIRouter(dependencies=[Depends(get_current_admin)])


@router.post("", response_model=MessageResponse, status_code=status.HTTP_202_ACCEPTED)
async def send_newsletter(
    data: NewsletterRequest,
    transport: ChannelTransport = Depends(get_transport),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    """
    Broadcast a newsletter to every registered channel.

    Delivery is best effort; failed channels are only logged.
    """
    broadcaster = NewsletterBroadcaster(db, transport)
    await broadcaster.broadcast(data.text, data.link)
    return MessageResponse(message="Newsletter sent")
