#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from curseforge import CurseForgeClient, ModLoaderType, ProjectFilesParams


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List the files of a CurseForge project")
    p.add_argument("project_id", nargs="?", type=int, default=238222)
    p.add_argument("game_version", nargs="?", default=None)
    p.add_argument("--loader", default=None, choices=[m.name for m in ModLoaderType])
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    params = ProjectFilesParams(
        game_version=args.game_version,
        mod_loader=ModLoaderType[args.loader] if args.loader else None,
    )

    async with CurseForgeClient(token=os.environ.get("CURSEFORGE_API_KEY")) as client:
        project = await client.project(args.project_id)
        print("=" * 72)
        print(f"Project : {project.name} ({project.slug})")
        print("=" * 72)
        async for f in client.project_files_iter(args.project_id, params):
            versions = ", ".join(f.game_versions)
            print(f"{f.file_date:%Y-%m-%d} | {f.release_type.name:>7} | {f.file_name} [{versions}]")


if __name__ == "__main__":
    asyncio.run(main())
