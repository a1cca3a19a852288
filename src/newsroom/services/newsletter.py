"""
Newsletter broadcaster.

Fans one announcement out to every registered channel. Each channel is
delivered by its own worker; a failing or hanging channel is logged and
skipped without affecting the others.
"""

import asyncio
import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.adapters.base import ChannelTransport
from newsroom.config import Settings, get_settings
from newsroom.services.channel_registry import ChannelRegistry

logger = logging.getLogger(__name__)


def channel_destination(channel_id: str) -> str:
    """Chat address for a stored channel id (supergroup ids are negative)."""
    return f"-{channel_id}"


@dataclass
class DeliveryFailure:
    """A channel that could not be reached."""
    destination: str
    error: str


class NewsletterBroadcaster:
    """
    Sends a newsletter to every channel in the registry.
    """

    def __init__(
        self,
        session: AsyncSession,
        transport: ChannelTransport,
        settings: Settings | None = None,
    ) -> None:
        self.registry = ChannelRegistry(session)
        self.transport = transport
        self.settings = settings or get_settings()

    async def broadcast(self, text: str, link: str) -> None:
        """
        Deliver text with a link button to all channels.

        Per-channel errors and timeouts are logged once every send has
        finished; nothing is raised to the caller.

        Args:
            text: Message body in the configured parse mode
            link: Target of the button
        """
        channels = await self.registry.list()
        if not channels:
            logger.info("No newsletter channels registered, nothing to send")
            return

        destinations = [channel_destination(c.channel_id) for c in channels]
        semaphore = asyncio.Semaphore(self.settings.newsletter_max_concurrency)
        failures: list[DeliveryFailure] = []

        async def worker(destination: str) -> None:
            async with semaphore:
                try:
                    await asyncio.wait_for(
                        self.transport.send(
                            destination,
                            text,
                            self.settings.newsletter_action_label,
                            link,
                            self.settings.newsletter_parse_mode,
                        ),
                        timeout=self.settings.newsletter_send_timeout_seconds,
                    )
                except asyncio.TimeoutError:
                    logger.warning(f"Timed out sending newsletter to {destination}")
                    failures.append(DeliveryFailure(destination, "timeout"))
                except Exception as e:
                    logger.exception(f"Failed to send newsletter to {destination}: {e}")
                    failures.append(DeliveryFailure(destination, str(e)))

        await asyncio.gather(*(worker(d) for d in destinations))

        sent = len(destinations) - len(failures)
        logger.info(
            f"Newsletter delivered via {self.transport.platform_name} "
            f"to {sent}/{len(destinations)} channels"
        )
        if failures:
            logger.warning(
                "Newsletter failed for: "
                + ", ".join(f"{f.destination} ({f.error})" for f in failures)
            )
