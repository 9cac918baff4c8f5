#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from sonarqube.client import ProjectTagsSetOption, SonarClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Replace the tags of a project (no tags clears them)")
    p.add_argument("project")
    p.add_argument("tags", nargs="*")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with SonarClient.from_env() as sonar:
        response = await sonar.project_tags.set(
            ProjectTagsSetOption(project=args.project, tags=args.tags)
        )
        print(f"{response.method} {response.url} -> {response.status}")


if __name__ == "__main__":
    asyncio.run(main())
