#!/usr/bin/env python3
"""
01_queue_status.py - Print version and queue summary

Demonstrates: Basic SABnzbdClient usage configured from the environment
Note: Requires SABNZBD_URL and SABNZBD_API_KEY to point at a running SABnzbd
"""
import asyncio

from sabnzbd_client import SABnzbdClient, Settings, TransportError


async def main() -> None:
    """Show the server version and the first few queued jobs."""
    settings = Settings()

    try:
        async with SABnzbdClient.from_settings(settings) as sab:
            print(f"SABnzbd {await sab.version()}")

            queue = await sab.queue(limit=5)
            print(f"Paused: {queue.get('paused')}, speed: {queue.get('speed')}")
            for slot in queue.get("slots", []):
                print(f"  {slot['nzo_id']}  {slot['percentage']:>3}%  {slot['filename']}")
    except TransportError as e:
        print(f"Could not reach SABnzbd: {e}")


if __name__ == "__main__":
    asyncio.run(main())
