#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from sonarqube.client import IssuesSearchOption, SonarClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List open issues of a project, page by page")
    p.add_argument("project")
    p.add_argument("--severity", action="append", default=[])
    p.add_argument("--page-size", type=int, default=100)
    p.add_argument("--max-pages", type=int, default=5)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    async with SonarClient.from_env() as sonar:
        page = 1
        while page <= args.max_pages:
            result, _ = await sonar.issues.search(
                IssuesSearchOption(
                    projects=[args.project],
                    severities=args.severity,
                    resolved=False,
                    page=page,
                    page_size=args.page_size,
                )
            )
            for issue in result.issues:
                location = f"{issue.component}:{issue.line or '-'}"
                print(f"{issue.severity:8} | {issue.rule:20} | {location}")
            if not result.paging.has_next:
                break
            page += 1
        print(f"Total: {result.paging.total}")


if __name__ == "__main__":
    asyncio.run(main())
