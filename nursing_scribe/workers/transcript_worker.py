"""
Transcript Worker.

Picks up transcripts that were stored but never processed (for instance
because the API process stopped mid-request) and runs the extraction
pipeline on them. Each pass also deletes raw transcripts whose retention
window has expired.

Start with:
    python -m nursing_scribe.workers.transcript_worker
"""

from __future__ import annotations

import asyncio
import signal

from dotenv import load_dotenv
load_dotenv(".env.local")

from nursing_scribe.config import get_settings
from nursing_scribe.logging_config import get_logger, setup_logging
from nursing_scribe.services.context import ScribeContext, build_context

setup_logging()
logger = get_logger(__name__)


class TranscriptWorker:
    """
    Polls the transcript store.

    Flow:
    1. Delete transcripts past ``expires_at``
    2. Fetch up to ``worker_batch_size`` unprocessed transcripts
    3. Run the pipeline on each; the processor marks them processed
    4. Sleep for the poll interval when there was nothing to do
    """

    def __init__(self, context: ScribeContext, poll_interval: float) -> None:
        self._context = context
        self._poll_interval = poll_interval
        self._running = False

    async def start(self) -> None:
        self._running = True
        logger.info("transcript_worker_started", poll_interval=self._poll_interval)

        while self._running:
            try:
                processed = await self.run_once()
                if not processed:
                    await asyncio.sleep(self._poll_interval)
                else:
                    await asyncio.sleep(1.0)
            except Exception as e:
                logger.error("transcript_worker_error", error=str(e))
                await asyncio.sleep(self._poll_interval)

    async def stop(self) -> None:
        self._running = False
        logger.info("transcript_worker_stopped")

    async def run_once(self) -> int:
        """One purge + processing pass; returns the number of transcripts processed."""
        await self._context.processor.purge_expired()
        processed = await self._context.processor.process_pending()
        if processed:
            logger.info("pending_transcripts_processed", count=processed)
        return processed


async def main() -> None:
    settings = get_settings()
    context = build_context(settings)
    worker = TranscriptWorker(context, settings.worker_poll_interval_seconds)

    loop = asyncio.get_running_loop()

    def shutdown_handler() -> None:
        logger.info("shutdown_signal_received")
        asyncio.ensure_future(worker.stop())

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown_handler)
        except NotImplementedError:
            pass

    try:
        await worker.start()
    finally:
        await context.close()


if __name__ == "__main__":
    asyncio.run(main())
