from __future__ import annotations

import asyncio
import itertools
from typing import Any, Dict, List, Optional

import pytest

import shoal


class FakeHTTP:
    """Stands in for shoal.HTTPClient, serving canned payloads and recording every call."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self.channels: Dict[int, Dict[str, Any]] = {}
        self.users: Dict[int, Dict[str, Any]] = {}
        self.roles: Dict[int, List[Dict[str, Any]]] = {}
        self.created: List[Dict[str, Any]] = []
        self._ids = itertools.count(9000)

    async def get_channel(self, channel_id: int) -> Dict[str, Any]:
        self.calls.append(("get_channel", channel_id))
        await asyncio.sleep(0)
        if channel_id not in self.channels:
            raise shoal.NotFound({"code": 10003, "message": "Unknown Channel"}, 404)

        return dict(self.channels[channel_id])

    async def get_user(self, user_id: int) -> Dict[str, Any]:
        self.calls.append(("get_user", user_id))
        await asyncio.sleep(0)
        if user_id not in self.users:
            raise shoal.NotFound({"code": 10013, "message": "Unknown User"}, 404)

        return dict(self.users[user_id])

    async def get_guild_roles(self, guild_id: int) -> List[Dict[str, Any]]:
        self.calls.append(("get_guild_roles", guild_id))
        return [dict(role) for role in self.roles.get(guild_id, [])]

    async def create_guild_role(
        self, guild_id: int, data: Dict[str, Any], *, reason: Optional[str] = None
    ) -> Dict[str, Any]:
        self.calls.append(("create_guild_role", guild_id))
        self.created.append({"data": data, "reason": reason})

        return {"id": str(next(self._ids)), "position": 1, **data}

    async def modify_guild_role_positions(
        self, guild_id: int, positions: List[Dict[str, Any]], *, reason: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        self.calls.append(("modify_guild_role_positions", guild_id, positions))
        return [{"id": position["id"], "position": position["position"]} for position in positions]

    async def close(self) -> None:
        pass


def make_guild_payload() -> Dict[str, Any]:
    return {
        "id": "1000",
        "name": "Test Guild",
        "owner_id": "1",
        "roles": [
            {"id": "1000", "name": "@everyone", "position": 0, "permissions": "0"},
            {"id": "1001", "name": "mods", "position": 3, "permissions": "8"},
            {"id": "1002", "name": "admins", "position": 7, "permissions": "8"},
            {"id": "1003", "name": "members", "position": 2, "permissions": "0"},
        ],
        "channels": [
            {"id": "2000", "type": 0, "name": "general", "position": 0},
            {"id": "2001", "type": 2, "name": "Lounge", "position": 1, "parent_id": "2002"},
            {"id": "2002", "type": 4, "name": "Voice Channels", "position": 2},
        ],
        "members": [
            {
                "user": {"id": "1", "username": "owner", "discriminator": "0001"},
                "roles": ["1001", "1002"],
                "joined_at": "2021-01-01T00:00:00",
            },
        ],
        "voice_states": [
            {"user_id": "1", "channel_id": "2001", "session_id": "abc"},
        ],
    }


@pytest.fixture
def http() -> FakeHTTP:
    return FakeHTTP()


@pytest.fixture
def client(http: FakeHTTP) -> shoal.Client:
    client = shoal.Client("token")
    client.http = http  # type: ignore
    return client


@pytest.fixture
def state(client: shoal.Client) -> shoal.State:
    return client._state


@pytest.fixture
def guild_payload() -> Dict[str, Any]:
    return make_guild_payload()


@pytest.fixture
def guild(state: shoal.State, guild_payload: Dict[str, Any]) -> shoal.Guild:
    return state.add_guild(guild_payload)
