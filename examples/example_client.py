from __future__ import annotations

import asyncio
import logging
import os

import shoal


async def main() -> None:
    client = shoal.Client(os.getenv("DISCORD_TOKEN"))  # type: ignore

    try:
        channel = await client.channels.fetch(os.getenv("CHANNEL_ID", "0"))
        print(f"[FETCHED CHANNEL]: {channel!r}")

        # Served from the cache, no request is made.
        same = await client.channels.fetch(channel.id)  # type: ignore
        assert same is channel

        user = await client.users.fetch(os.getenv("USER_ID", "0"))
        print(f"[FETCHED USER]: {user}")
    finally:
        await client.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
