import asyncio

import pytest

import shoal


def test_roles_are_bound_to_guild(guild):
    assert len(guild.roles) == 4
    assert all(role.guild is guild for role in guild.roles)


def test_everyone(guild):
    everyone = guild.roles.everyone

    assert everyone.id == guild.id
    assert everyone.is_default
    assert everyone.mention == "@everyone"
    assert guild.default_role is everyone


def test_highest(guild):
    assert guild.roles.highest.id == 1002


def test_highest_tiebreak_is_stable(guild):
    guild.roles.add({"id": "1004", "name": "also admins", "position": 7})

    assert guild.roles.highest.id == 1002
    assert guild.roles.highest is guild.roles.highest


def test_highest_tiebreak_ignores_insertion_order(state):
    guild = state.add_guild(
        {
            "id": "5000",
            "roles": [
                {"id": "5002", "position": 7},
                {"id": "5001", "position": 7},
                {"id": "5000", "position": 0},
            ],
        }
    )

    assert guild.roles.highest.id == 5001


def test_highest_on_empty_cache(state):
    guild = state.add_guild({"id": "6000"})

    assert guild.roles.highest is None


def test_compare_positions(guild):
    mods = guild.roles.get(1001)
    admins = guild.roles.get(1002)

    assert admins.compare_position_to(mods) > 0
    assert mods.compare_position_to(admins) < 0
    assert mods.compare_position_to(mods) == 0


def test_add_patches_existing_role(guild):
    mods = guild.roles.get(1001)

    role = guild.roles.add({"id": "1001", "name": "moderators", "position": 4})

    assert role is mods
    assert mods.name == "moderators"
    assert mods.position == 4
    assert len(guild.roles) == 4


def test_role_permissions(guild):
    assert guild.roles.get(1002).permissions == shoal.Permissions.ADMINISTRATOR


@pytest.mark.asyncio
async def test_fetch_cached_role_makes_no_request(guild, http):
    role = await guild.roles.fetch("1001")

    assert role is guild.roles.get(1001)
    assert http.calls == []


@pytest.mark.asyncio
async def test_fetch_missing_role_fetches_all(guild, guild_payload, http):
    http.roles[1000] = guild_payload["roles"] + [{"id": "1999", "name": "new", "position": 5}]
    mods = guild.roles.get(1001)

    role = await guild.roles.fetch(1999)

    assert role is guild.roles.get(1999)
    assert role.position == 5
    assert guild.roles.get(1001) is mods
    assert http.calls == [("get_guild_roles", 1000)]


@pytest.mark.asyncio
async def test_fetch_unknown_role_returns_none(guild, guild_payload, http):
    http.roles[1000] = guild_payload["roles"]

    assert await guild.roles.fetch(5555) is None
    assert http.calls == [("get_guild_roles", 1000)]


@pytest.mark.asyncio
async def test_fetch_all_returns_manager(guild, http):
    http.roles[1000] = [{"id": "1998", "position": 1}, {"id": "1999", "position": 2}]

    manager = await guild.roles.fetch()

    assert manager is guild.roles
    assert len(guild.roles) == 6


@pytest.mark.asyncio
async def test_fetch_all_without_cache(guild, http):
    http.roles[1000] = [{"id": "1999", "position": 2}]

    await guild.roles.fetch(cache=False)

    assert guild.roles.get(1999) is None


@pytest.mark.asyncio
async def test_create_resolves_color_and_permissions(guild, http):
    role = await guild.roles.create(
        data={"name": "helpers", "color": "RED", "permissions": ["KICK_MEMBERS", "BAN_MEMBERS"]},
        reason="more help",
    )

    sent = http.created[-1]
    assert sent["reason"] == "more help"
    assert sent["data"]["color"] == shoal.utils.Colors.RED.value
    assert sent["data"]["permissions"] == "6"

    assert role is guild.roles.get(role.id)
    assert role.name == "helpers"
    assert role.permissions == shoal.Permissions.KICK_MEMBERS | shoal.Permissions.BAN_MEMBERS


@pytest.mark.asyncio
async def test_create_does_not_mutate_caller_data(guild):
    data = {"name": "helpers", "color": "RED"}

    await guild.roles.create(data=data)

    assert data == {"name": "helpers", "color": "RED"}


@pytest.mark.asyncio
async def test_create_with_position(guild, http):
    role = await guild.roles.create(data={"name": "raised", "position": 5})

    assert "position" not in http.created[-1]["data"]
    assert http.calls[-1] == ("modify_guild_role_positions", 1000, [{"id": str(role.id), "position": 5}])
    assert role.position == 5
    assert role is guild.roles.get(role.id)


@pytest.mark.asyncio
async def test_created_role_is_dispatched_once(client, state, guild):
    created = []

    @client.on("guild_role_create")
    async def on_role_create(role):
        created.append(role)

    role = await guild.roles.create(data={"name": "once"})
    await state.parse("GUILD_ROLE_CREATE", {"guild_id": "1000", "role": {"id": str(role.id), "name": "once"}})
    await asyncio.sleep(0.01)

    assert created == [role]
