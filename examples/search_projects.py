#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from curseforge import CompatibilityMode, CurseForgeClient, SearchParams, SearchSort, SortOrder


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search CurseForge projects across pages")
    p.add_argument("query", nargs="?", default="")
    p.add_argument("game_id", nargs="?", type=int, default=432)
    p.add_argument("limit", nargs="?", type=int, default=25)
    p.add_argument("--page-size", type=int, default=10)
    p.add_argument(
        "--mode", default="lenient", choices=[m.value for m in CompatibilityMode]
    )
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    params = SearchParams(
        game_id=args.game_id,
        search_filter=args.query or None,
        sort_field=SearchSort.POPULARITY,
        sort_order=SortOrder.DESCENDING,
        page_size=args.page_size,
    )

    async with CurseForgeClient(
        token=os.environ.get("CURSEFORGE_API_KEY"),
        compatibility=args.mode,
        results_limit=args.limit,
    ) as client:
        stream = client.search_projects_iter(params)
        print("=" * 72)
        print(f"{'ID':>8} | {'Downloads':>14} | Name")
        print("-" * 72)
        async for project in stream:
            print(f"{project.id:>8} | {project.download_count:>14,.0f} | {project.name}")
        print("=" * 72)
        _, upper = stream.size_hint()
        print(f"Pages fetched : {stream.pages_fetched}")
        print(f"Reported total: {upper}")


if __name__ == "__main__":
    asyncio.run(main())
