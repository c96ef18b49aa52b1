import asyncio

import pytest

import shoal


@pytest.mark.asyncio
async def test_guild_create(client, state, guild_payload):
    await state.parse("GUILD_CREATE", guild_payload)

    guild = client.get_guild(1000)
    assert guild is not None
    assert client.guilds == [guild]
    assert guild.name == "Test Guild"
    assert len(guild.roles) == 4
    assert len(guild.channels) == 3
    assert len(guild.voice_states) == 1
    assert client.get_user(1) is guild.get_member(1).user


@pytest.mark.asyncio
async def test_ready_caches_user_and_unavailable_guilds(client, state):
    await state.parse(
        "READY",
        {"user": {"id": "99", "username": "bot", "discriminator": "0099", "bot": True}, "guilds": [{"id": "1000", "unavailable": True}]},
    )

    assert client.user is client.get_user(99)
    assert client.get_guild(1000).unavailable


@pytest.mark.asyncio
async def test_guild_update_preserves_roles(state, guild):
    mods = guild.roles.get(1001)

    await state.parse(
        "GUILD_UPDATE",
        {
            "id": "1000",
            "name": "Renamed",
            "roles": [
                {"id": "1000", "position": 0},
                {"id": "1001", "name": "mods", "position": 6},
            ],
        },
    )

    assert guild.name == "Renamed"
    assert guild.roles.get(1001) is mods
    assert mods.position == 6
    assert guild.roles.get(1002) is None
    assert len(guild.channels) == 3


@pytest.mark.asyncio
async def test_guild_delete_removes_channels(client, state, guild):
    await state.parse("GUILD_DELETE", {"id": "1000"})

    assert client.get_guild(1000) is None
    assert len(client.channels) == 0


@pytest.mark.asyncio
async def test_unavailable_guild_is_kept(client, state, guild):
    await state.parse("GUILD_DELETE", {"id": "1000", "unavailable": True})

    assert client.get_guild(1000) is guild
    assert guild.unavailable
    assert len(client.channels) == 3


@pytest.mark.asyncio
async def test_channel_create_update_delete(client, state, guild):
    await state.parse("CHANNEL_CREATE", {"id": "2100", "type": 0, "name": "new", "guild_id": "1000"})

    channel = client.get_channel(2100)
    assert channel in guild.channels

    waiter = asyncio.ensure_future(client.wait_for("channel_update", timeout=1))
    await asyncio.sleep(0)
    await state.parse("CHANNEL_UPDATE", {"id": "2100", "type": 0, "name": "renamed", "guild_id": "1000"})

    before, after = await waiter
    assert after is channel
    assert before is not channel
    assert before.name == "new"
    assert channel.name == "renamed"

    await state.parse("CHANNEL_DELETE", {"id": "2100", "type": 0, "guild_id": "1000"})

    assert client.get_channel(2100) is None
    assert channel not in guild.channels


@pytest.mark.asyncio
async def test_role_update_and_delete(state, guild):
    admins = guild.roles.get(1002)

    await state.parse("GUILD_ROLE_UPDATE", {"guild_id": "1000", "role": {"id": "1002", "name": "owners", "position": 7}})
    assert admins.name == "owners"

    await state.parse("GUILD_ROLE_DELETE", {"guild_id": "1000", "role_id": "1002"})
    assert guild.roles.get(1002) is None
    assert guild.roles.highest.id == 1001


@pytest.mark.asyncio
async def test_voice_state_update(state, guild):
    voice_state = guild.voice_states.get(1)

    await state.parse("VOICE_STATE_UPDATE", {"guild_id": "1000", "user_id": "1", "channel_id": "2001", "self_mute": True})
    assert guild.voice_states.get(1) is voice_state
    assert voice_state.self_mute

    await state.parse("VOICE_STATE_UPDATE", {"guild_id": "1000", "user_id": "1", "channel_id": None})
    assert guild.voice_states.get(1) is None


@pytest.mark.asyncio
async def test_member_add_and_remove(client, state, guild):
    await state.parse(
        "GUILD_MEMBER_ADD",
        {"guild_id": "1000", "user": {"id": "2", "username": "joined", "discriminator": "0002"}, "roles": []},
    )

    member = guild.get_member(2)
    assert member.user is client.get_user(2)

    await state.parse("GUILD_MEMBER_REMOVE", {"guild_id": "1000", "user": {"id": "2"}})
    assert guild.get_member(2) is None


@pytest.mark.asyncio
async def test_message_create_caches_author(client, state, guild):
    waiter = asyncio.ensure_future(client.wait_for("message_create", timeout=1))
    await asyncio.sleep(0)

    await state.parse(
        "MESSAGE_CREATE",
        {"id": "500", "channel_id": "2000", "content": "hi", "author": {"id": "3", "username": "talker", "discriminator": "0003"}},
    )

    message = await waiter
    assert message.channel is client.get_channel(2000)
    assert message.guild is guild
    assert message.author is client.get_user(3)
    assert client.users.resolve(message) is message.author


@pytest.mark.asyncio
async def test_user_update_patches_in_place(client, state):
    user = client.users.add({"id": "4", "username": "old", "discriminator": "0004"})

    await state.parse("USER_UPDATE", {"id": "4", "username": "new", "discriminator": "0004"})

    assert client.get_user(4) is user
    assert user.username == "new"


@pytest.mark.asyncio
async def test_unknown_event_is_ignored(client, state):
    await state.parse("SOMETHING_NEW", {"id": "1"})

    assert len(client.channels) == 0
    assert len(client.users) == 0
