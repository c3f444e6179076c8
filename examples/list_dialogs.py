#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from parley.dialogs import DialogsClient, TransportConfig


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List dialogs through a gateway")
    p.add_argument("--limit", type=int, default=None, help="Stop after this many dialogs")
    p.add_argument("--folder", type=int, default=None, help="Folder id (default: main list)")
    p.add_argument("--base-url", default=None, help="Gateway URL (default: $PARLEY_GATEWAY_URL)")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    overrides = {"base_url": args.base_url} if args.base_url else {}
    async with DialogsClient.from_config(TransportConfig.from_env(**overrides)) as client:
        total = await client.iter_dialogs(folder_id=args.folder).total()
        print(f"Total dialogs: {total}")

        async for dialog in client.iter_dialogs(limit=args.limit, folder_id=args.folder):
            pin = "*" if dialog.pinned else " "
            print(
                f"{pin} {dialog.entity.kind:<17} {dialog.id:>12} | "
                f"{dialog.title} ({dialog.unread_count} unread)"
            )


if __name__ == "__main__":
    asyncio.run(main())
