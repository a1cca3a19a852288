"""
Base transport class for messaging platforms.

The newsletter broadcaster only needs to push one message with one link
button to one destination; each platform implements that here.
"""

from abc import ABC, abstractmethod


class ChannelTransport(ABC):
    """
    Abstract base class for outbound message transports.
    """

    @property
    @abstractmethod
    def platform_name(self) -> str:
        """Return the platform name (e.g., 'telegram')."""
        pass

    async def start(self) -> None:
        """Open connections to the platform."""
        pass

    async def stop(self) -> None:
        """Close connections to the platform."""
        pass

    @abstractmethod
    async def send(
        self,
        destination: str,
        text: str,
        action_label: str,
        action_url: str,
        format_mode: str,
    ) -> None:
        """
        Send a message with a single link button.

        Args:
            destination: Platform-specific chat address
            text: Message body, already formatted for format_mode
            action_label: Button caption
            action_url: Button target
            format_mode: Rich-text mode understood by the platform

        Raises:
            Exception: Any delivery failure
        """
        pass
