#!/usr/bin/env python3
"""
02_add_and_prioritise.py - Add an NZB and move it to the top

Demonstrates: Named priorities, unwrap results, remote-reported failures
Note: Requires SABNZBD_URL and SABNZBD_API_KEY to point at a running SABnzbd
"""
import asyncio
import sys

from sabnzbd_client import PostProcessing, SABnzbdClient, Settings


async def main(nzb_url: str) -> None:
    """Queue ``nzb_url`` with high priority and full post-processing."""
    async with SABnzbdClient.from_settings(Settings()) as sab:
        result = await sab.add_by_url(
            nzb_url,
            priority="high",
            post_processing=PostProcessing.REPAIR_UNPACK_DELETE,
        )

        # Failures come back as data, not exceptions
        if result is False or isinstance(result, dict):
            print(f"SABnzbd rejected the NZB: {result}")
            return

        for nzo_id in result:
            await sab.move_job(nzo_id, 0)
            print(f"Queued {nzo_id} at the top of the queue")


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1]))
