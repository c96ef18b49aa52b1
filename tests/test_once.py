import asyncio

import pytest

import shoal


@pytest.mark.asyncio
async def test_once() -> None:
    client = shoal.Client("token")
    received = []

    @client.once("test_event")
    async def on_test_event(value) -> None:
        received.append(value)

    client._state.dispatch("test_event", 1)
    client._state.dispatch("test_event", 2)
    await asyncio.sleep(0.01)

    assert received == [1]
    assert "test_event" not in client.once_events


def test_listener_must_be_coroutine() -> None:
    client = shoal.Client("token")

    with pytest.raises(TypeError):
        client.add_listener(lambda: None, "test_event")  # type: ignore
