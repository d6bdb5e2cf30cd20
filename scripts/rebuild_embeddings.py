"""
Embedding Index Rebuild Script.

Deletes every stored field embedding and regenerates the index from the
field catalog. Run after any change to the catalog data.
"""

import asyncio
import os
import sys

# Add project root to path so we can import nursing_scribe
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from dotenv import load_dotenv
load_dotenv(".env.local")

from nursing_scribe.logging_config import setup_logging, get_logger
from nursing_scribe.services.context import build_context

setup_logging()
logger = get_logger(__name__)


async def rebuild() -> int:
    context = build_context()
    try:
        logger.info("Rebuilding field embeddings...", fields=len(context.catalog))
        report = await context.index_builder.rebuild_index()
    finally:
        await context.close()

    if report.error_count:
        logger.error(
            "Rebuild finished with errors",
            success_count=report.success_count,
            error_count=report.error_count,
        )
        return 1
    logger.info("Rebuild complete.", success_count=report.success_count)
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(rebuild()))
