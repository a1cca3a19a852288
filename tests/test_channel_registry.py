"""Tests for the newsletter channel registry."""

import pytest
from pydantic import ValidationError

from newsroom.exceptions import NotFoundError
from newsroom.schemas import ChannelCreate
from newsroom.services.channel_registry import ChannelRegistry


class TestChannelRegistry:
    @pytest.mark.asyncio
    async def test_add_and_list_in_order(self, session):
        registry = ChannelRegistry(session)
        first = await registry.add("1001")
        second = await registry.add("1002")

        channels = await registry.list()

        assert [(c.id, c.channel_id) for c in channels] == [
            (first.id, "1001"),
            (second.id, "1002"),
        ]

    @pytest.mark.asyncio
    async def test_remove(self, session):
        registry = ChannelRegistry(session)
        channel = await registry.add("1001")

        await registry.remove(channel.id)

        assert list(await registry.list()) == []

    @pytest.mark.asyncio
    async def test_remove_missing_is_not_found(self, session):
        registry = ChannelRegistry(session)
        with pytest.raises(NotFoundError):
            await registry.remove(42)


class TestChannelCreate:
    @pytest.mark.parametrize("channel_id", ["1", "1001234567890"])
    def test_accepts_ascii_digits(self, channel_id):
        assert ChannelCreate(channel_id=channel_id).channel_id == channel_id

    @pytest.mark.parametrize("channel_id", ["", "0", "0123", "-100", "12a", "1٣", "١٢"])
    def test_rejects_other_ids(self, channel_id):
        with pytest.raises(ValidationError):
            ChannelCreate(channel_id=channel_id)
