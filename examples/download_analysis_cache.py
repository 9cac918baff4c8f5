#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from sonarqube.client import AnalysisCacheGetOption, ClientConfig, HTTPClient, SonarClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Save the scanner cache of a branch to a file")
    p.add_argument("project")
    p.add_argument("output")
    p.add_argument("--branch", default="")
    p.add_argument("--gzip", action="store_true", help="Keep the body gzip-compressed")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    config = ClientConfig.from_env()
    async with HTTPClient(config.timeout, auto_decompress=not args.gzip) as http:
        sonar = SonarClient(config, http_client=http)
        stream, _ = await sonar.analysis_cache.get(
            AnalysisCacheGetOption(project=args.project, branch=args.branch, gzip=args.gzip)
        )
        size = 0
        with open(args.output, "wb") as fh:
            async for chunk in stream.iter_chunks():
                fh.write(chunk)
                size += len(chunk)
        print(f"Wrote {size} bytes to {args.output}")


if __name__ == "__main__":
    asyncio.run(main())
