#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from sonarqube.client import SonarClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print SonarQube version and status")
    p.add_argument("--url", default=None, help="API root, e.g. https://sonar.example.com/api/")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with SonarClient.from_env(url=args.url) as sonar:
        version, _ = await sonar.server.version()
        status, _ = await sonar.system.status()
        print(f"Server {status.id}: version {version}, status {status.status}")


if __name__ == "__main__":
    asyncio.run(main())
