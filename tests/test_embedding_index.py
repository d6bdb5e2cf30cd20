# tests/test_embedding_index.py
"""Tests for services/embedding_index.py and the in-memory vector index."""

import asyncio

from conftest import FakeEmbedder

from nursing_scribe.errors import PersistenceError
from nursing_scribe.services.embedding_index import (
    EmbeddingIndexBuilder,
    render_medical_context,
)
from nursing_scribe.services.vector_search import InMemoryVectorSearch


class FailingClearStore(InMemoryVectorSearch):
    async def clear(self) -> None:
        raise PersistenceError("delete on field_embeddings refused")


class TestRenderMedicalContext:
    def test_choice_field_document(self, catalog):
        document = render_medical_context(catalog.lookup("morse_ambulatory_aid"))
        assert document.startswith("Medical Field: ")
        assert "Section: Risk Assessment" in document
        assert "Field Type: select" in document
        assert "Options: " in document
        assert "Crutches/cane/walker (15 points)" in document
        assert "Extraction Hints: " in document

    def test_format_line_only_when_declared(self, catalog):
        assert "Format: ##.#°C" in render_medical_context(catalog.lookup("temperature"))
        assert "Format:" not in render_medical_context(catalog.lookup("gcs_total"))

    def test_no_options_line_for_free_text(self, catalog):
        assert "Options:" not in render_medical_context(catalog.lookup("current_complaint"))


class TestRebuildIndex:
    def test_rebuild_embeds_every_field(self, catalog, embedder, memory_search):
        builder = EmbeddingIndexBuilder(catalog, embedder, memory_search)
        report = asyncio.run(builder.rebuild_index())

        assert report.success_count == len(catalog)
        assert report.error_count == 0
        assert memory_search.field_ids == {d.field_id for d in catalog}

    def test_rebuild_is_idempotent(self, catalog, embedder, memory_search):
        builder = EmbeddingIndexBuilder(catalog, embedder, memory_search)
        asyncio.run(builder.rebuild_index())
        first = {fid: memory_search.get(fid).embedding for fid in memory_search.field_ids}

        asyncio.run(builder.rebuild_index())
        second = {fid: memory_search.get(fid).embedding for fid in memory_search.field_ids}

        assert first == second
        assert len(second) == len(catalog)

    def test_stored_document_matches_rendering(self, catalog, embedder, memory_search):
        builder = EmbeddingIndexBuilder(catalog, embedder, memory_search)
        asyncio.run(builder.rebuild_index())
        stored = memory_search.get("pulse")
        assert stored.source_text == render_medical_context(catalog.lookup("pulse"))

    def test_per_field_failure_is_counted_not_fatal(self, catalog, memory_search):
        embedder = FakeEmbedder(fail_on="Medical Field: Pulse Rate")
        builder = EmbeddingIndexBuilder(catalog, embedder, memory_search)
        report = asyncio.run(builder.rebuild_index())

        assert report.error_count == 1
        assert report.success_count == len(catalog) - 1
        assert "pulse" not in memory_search.field_ids
        assert "temperature" in memory_search.field_ids

    def test_clear_failure_does_not_abort(self, catalog, embedder):
        store = FailingClearStore()
        report = asyncio.run(EmbeddingIndexBuilder(catalog, embedder, store).rebuild_index())
        assert report.success_count == len(catalog)

    def test_report_serialises_camel_case(self, catalog, embedder, memory_search):
        report = asyncio.run(EmbeddingIndexBuilder(catalog, embedder, memory_search).rebuild_index())
        dumped = report.model_dump(by_alias=True)
        assert set(dumped) == {"successCount", "errorCount"}


class TestInMemoryIndexSwap:
    def test_search_sees_old_index_until_publish(self, catalog, embedder):
        index = InMemoryVectorSearch()
        pulse = catalog.lookup("pulse")
        temperature = catalog.lookup("temperature")

        async def scenario():
            await index.insert(pulse, [1.0, 0.0], "pulse doc")
            await index.clear()
            await index.insert(temperature, [0.0, 1.0], "temperature doc")
            before = await index.search([0.0, 1.0], 0.0, 10)
            await index.publish()
            after = await index.search([0.0, 1.0], 0.0, 10)
            return before, after

        before, after = asyncio.run(scenario())
        assert [c.field_id for c in before] == ["pulse"]
        assert [c.field_id for c in after] == ["temperature"]
