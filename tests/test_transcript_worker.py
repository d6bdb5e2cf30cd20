# tests/test_transcript_worker.py
"""Tests for workers/transcript_worker.py."""

import asyncio
from datetime import datetime, timedelta, timezone

from conftest import END_TO_END_TRANSCRIPT, FakeCompletion, FakeVectorSearch

from nursing_scribe.workers.transcript_worker import TranscriptWorker


def test_run_once_purges_then_processes(context_factory, store):
    context = context_factory(FakeCompletion([]), search=FakeVectorSearch(fail=True), store=store)
    worker = TranscriptWorker(context, poll_interval=0.01)
    now = datetime.now(timezone.utc)

    async def scenario():
        await store.insert_transcript("a-old", END_TO_END_TRANSCRIPT, now - timedelta(minutes=5))
        await store.insert_transcript("a-1", END_TO_END_TRANSCRIPT, now + timedelta(hours=24))
        for row in store.transcripts.values():
            row["created_at"] = now - timedelta(minutes=10)
        return await worker.run_once()

    assert asyncio.run(scenario()) == 1
    assert [row["assessment_id"] for row in store.transcripts.values()] == ["a-1"]
    assert ("a-1", "pulse") in store.field_values
    assert ("a-old", "pulse") not in store.field_values


def test_idle_pass_processes_nothing(context_factory, store):
    worker = TranscriptWorker(context_factory(FakeCompletion([]), store=store), poll_interval=0.01)
    assert asyncio.run(worker.run_once()) == 0


def test_stop_ends_loop(context_factory, store):
    worker = TranscriptWorker(context_factory(FakeCompletion([]), store=store), poll_interval=0.01)

    async def scenario():
        task = asyncio.create_task(worker.start())
        await asyncio.sleep(0.05)
        await worker.stop()
        await asyncio.wait_for(task, timeout=1.0)

    asyncio.run(scenario())


def test_fresh_transcript_left_for_its_request(context_factory, store):
    context = context_factory(FakeCompletion([]), search=FakeVectorSearch(fail=True), store=store)
    worker = TranscriptWorker(context, poll_interval=0.01)
    expires = datetime.now(timezone.utc) + timedelta(hours=24)

    async def scenario():
        await store.insert_transcript("a-1", END_TO_END_TRANSCRIPT, expires)
        return await worker.run_once()

    assert asyncio.run(scenario()) == 0
    assert store.field_values == {}
