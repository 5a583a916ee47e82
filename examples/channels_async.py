#!/usr/bin/env python3
"""
Async example demonstrating Hop Channels usage.

Creates a channel with initial state, issues a token subscribed to it,
publishes a few messages and cleans up.

Requirements:
- HOP_TOKEN environment variable set (or in a .env file)
- HOP_PROJECT_ID when HOP_TOKEN is a bearer token or PAT

Usage:
    python examples/channels_async.py
"""

import asyncio
import os

from dotenv import load_dotenv

from hop import AsyncHop, AuthType

load_dotenv()


async def main() -> None:
    token = os.getenv("HOP_TOKEN")
    if not token:
        print("HOP_TOKEN environment variable is required")
        return

    async with AsyncHop(token) as hop:
        scope = {}
        if hop.auth_type is not AuthType.SK:
            scope["project_id"] = os.environ["HOP_PROJECT_ID"]

        channel = await hop.channels.create(
            "unprotected", {"messages": 0}, channel_id="example-room", **scope
        )
        print(f"Channel {channel.id} created with state {channel.state}")

        leap_token = await hop.channels.tokens.create({"name": "example"}, **scope)
        await hop.channels.subscribe_token(channel.id, leap_token.id, **scope)

        for i in range(3):
            await hop.channels.publish_message(channel.id, "MESSAGE", {"n": i}, **scope)
            await hop.channels.patch_state(channel.id, {"messages": i + 1}, **scope)

        print(f"Final state: {await hop.channels.get_state(channel.id, **scope)}")

        await hop.channels.tokens.delete(leap_token.id, **scope)
        await hop.channels.delete(channel.id, **scope)


if __name__ == "__main__":
    asyncio.run(main())
