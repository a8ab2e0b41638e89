#!/usr/bin/env python3
"""Recompute replies_count for comments whose counter drifted.

Usage:
    python scripts/recount_replies.py <comment_id> [<comment_id> ...]
"""

import asyncio
import sys

import logfire

from commentary.application.usecase.comment import (
    RecountRepliesRequest,
    RecountRepliesUseCase,
)
from commentary.config import Settings
from commentary.util.di.container import create_container
from commentary.util.observability import configure_logfire


async def recount(comment_ids: list[str]) -> None:
    container = create_container()
    try:
        for comment_id in comment_ids:
            # One request scope (and transaction) per comment
            async with container() as request_container:
                use_case = await request_container.get(RecountRepliesUseCase)
                result = await use_case.execute(
                    RecountRepliesRequest(comment_id=comment_id)
                )
            logfire.info(
                "Recounted replies",
                comment_id=result.comment_id,
                previous_count=result.previous_count,
                replies_count=result.replies_count,
            )
    finally:
        await container.close()


def main() -> int:
    if len(sys.argv) < 2:
        print(__doc__)
        return 1

    configure_logfire(Settings())
    asyncio.run(recount(sys.argv[1:]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
