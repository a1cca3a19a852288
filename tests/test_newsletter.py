"""Tests for the newsletter broadcaster."""

import logging

import pytest

from newsroom.config import Settings
from newsroom.services.newsletter import NewsletterBroadcaster, channel_destination
from tests.conftest import RecordingTransport


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, newsletter_send_timeout_seconds=0.2)


class TestChannelDestination:
    def test_sign_flipped(self):
        assert channel_destination("1001234567890") == "-1001234567890"


class TestBroadcast:
    @pytest.mark.asyncio
    async def test_sends_to_every_channel(self, session_factory, add_channels, settings):
        await add_channels("11", "22", "33")
        transport = RecordingTransport()

        async with session_factory() as session:
            await NewsletterBroadcaster(session, transport, settings).broadcast(
                "*Breaking*", "https://example.com/news/1"
            )

        assert sorted(m["destination"] for m in transport.sent) == ["-11", "-22", "-33"]
        for message in transport.sent:
            assert message["text"] == "*Breaking*"
            assert message["action_label"] == "Full"
            assert message["action_url"] == "https://example.com/news/1"
            assert message["format_mode"] == "MarkdownV2"

    @pytest.mark.asyncio
    async def test_one_failure_does_not_stop_others(
        self, session_factory, add_channels, settings, caplog
    ):
        await add_channels("11", "22", "33")
        transport = RecordingTransport(fail_for={"-22"})

        with caplog.at_level(logging.WARNING, logger="newsroom.services.newsletter"):
            async with session_factory() as session:
                result = await NewsletterBroadcaster(session, transport, settings).broadcast(
                    "text", "https://example.com"
                )

        assert result is None
        assert sorted(transport.attempted) == ["-11", "-22", "-33"]
        assert sorted(m["destination"] for m in transport.sent) == ["-11", "-33"]
        assert "-22" in caplog.text

    @pytest.mark.asyncio
    async def test_all_but_one_failing(self, session_factory, add_channels, settings):
        await add_channels("1", "2", "3", "4")
        transport = RecordingTransport(fail_for={"-1", "-2", "-3"})

        async with session_factory() as session:
            await NewsletterBroadcaster(session, transport, settings).broadcast("text", "link")

        assert [m["destination"] for m in transport.sent] == ["-4"]

    @pytest.mark.asyncio
    async def test_hanging_channel_times_out(self, session_factory, add_channels, settings):
        await add_channels("11", "22")
        transport = RecordingTransport(hang_for={"-11"})

        async with session_factory() as session:
            await NewsletterBroadcaster(session, transport, settings).broadcast("text", "link")

        assert [m["destination"] for m in transport.sent] == ["-22"]

    @pytest.mark.asyncio
    async def test_bounded_concurrency_still_delivers_all(self, session_factory, add_channels):
        await add_channels(*[str(i) for i in range(1, 8)])
        transport = RecordingTransport(fail_for={"-3"})
        settings = Settings(_env_file=None, newsletter_max_concurrency=2)

        async with session_factory() as session:
            await NewsletterBroadcaster(session, transport, settings).broadcast("text", "link")

        assert len(transport.sent) == 6

    @pytest.mark.asyncio
    async def test_summary_names_platform(self, session_factory, add_channels, settings, caplog):
        await add_channels("11", "22")
        transport = RecordingTransport(fail_for={"-22"})

        with caplog.at_level(logging.INFO, logger="newsroom.services.newsletter"):
            async with session_factory() as session:
                await NewsletterBroadcaster(session, transport, settings).broadcast("text", "link")

        assert "via recording to 1/2 channels" in caplog.text

    @pytest.mark.asyncio
    async def test_no_channels(self, session_factory, engine, settings):
        transport = RecordingTransport()

        async with session_factory() as session:
            await NewsletterBroadcaster(session, transport, settings).broadcast("text", "link")

        assert transport.attempted == []
