"""Tests for sewa_bot.content — records and the news/gallery data files."""

from __future__ import annotations

import json

import pytest

from sewa_bot.classifier import ClassificationResult
from sewa_bot.content.datafiles import (
    GALLERY_PATH,
    NEWS_LIMIT,
    NEWS_PATH,
    add_gallery_photo,
    add_news,
    append_record,
    parse_collection,
    prepend_capped,
    read_collection,
)
from sewa_bot.content.records import ContentRecord, GalleryRecord
from sewa_bot.services.github import StaleVersionError


def _items(n: int, prefix: str = "old"):
    # newest first, like the file on disk
    return [{"id": f"{prefix}-{i}"} for i in range(n)]


def _result(**overrides) -> ClassificationResult:
    raw = {"category": "news", "title_english": "Gram sabha tomorrow", **overrides}
    return ClassificationResult.from_raw(raw, "कल बैठक होगी", has_image=False)


class TestParseCollection:
    @pytest.mark.parametrize("content", [None, "", "{not json", '{"id": 1}', "42"])
    def test_malformed_or_missing_is_empty(self, content):
        assert parse_collection(content) == []

    def test_list_is_returned(self):
        assert parse_collection('[{"id": "a"}]') == [{"id": "a"}]


class TestPrependCapped:
    @pytest.mark.parametrize("existing", [50, 51, 75])
    def test_cap_keeps_newest_fifty(self, existing):
        items = _items(existing)

        updated = prepend_capped(items, {"id": "new"}, NEWS_LIMIT)

        assert len(updated) == NEWS_LIMIT
        assert updated[0] == {"id": "new"}
        assert updated[1:] == items[: NEWS_LIMIT - 1]

    def test_under_cap_keeps_everything(self):
        updated = prepend_capped(_items(3), {"id": "new"}, NEWS_LIMIT)
        assert [i["id"] for i in updated] == ["new", "old-0", "old-1", "old-2"]

    def test_no_limit_is_unbounded(self):
        assert len(prepend_capped(_items(500), {"id": "new"})) == 501


class TestAppendRecord:
    def test_creates_missing_file_without_sha(self, store):
        append_record(store, NEWS_PATH, {"id": "a"}, "msg")

        assert store.commits == [(NEWS_PATH, "msg", None)]
        assert json.loads(store.files[NEWS_PATH]) == [{"id": "a"}]

    def test_malformed_file_is_reset(self, store):
        store.put_json(NEWS_PATH, "<<<garbage>>>")

        append_record(store, NEWS_PATH, {"id": "a"}, "msg", limit=NEWS_LIMIT)

        assert json.loads(store.files[NEWS_PATH]) == [{"id": "a"}]

    def test_stale_write_is_retried_once(self, store):
        store.put_json(NEWS_PATH, "[]")

        def concurrent_writer(path):
            # Another handler commits between our read and our write.
            store.put_json(path, json.dumps([{"id": "theirs"}]))

        store.before_write = concurrent_writer

        updated = append_record(store, NEWS_PATH, {"id": "ours"}, "msg", limit=NEWS_LIMIT)

        assert [i["id"] for i in updated] == ["ours", "theirs"]
        assert json.loads(store.files[NEWS_PATH]) == updated
        assert store.reads == [NEWS_PATH, NEWS_PATH]

    def test_second_stale_write_propagates(self, store):
        store.put_json(NEWS_PATH, "[]")
        store.fail_writes_to[NEWS_PATH] = StaleVersionError("conflict", 409)

        with pytest.raises(StaleVersionError):
            append_record(store, NEWS_PATH, {"id": "ours"}, "msg")

        assert store.reads == [NEWS_PATH, NEWS_PATH]


class TestAddNewsAndGallery:
    def test_news_record_shape(self, store):
        record = ContentRecord.from_classification(_result(), image="images/1_abcdef12.jpg")

        add_news(store, record)

        stored = json.loads(store.files[NEWS_PATH].decode("utf-8"))[0]
        assert set(stored) == {
            "id", "date", "timestamp", "title_hindi", "title_english",
            "description_hindi", "description_english", "image",
            "category", "priority", "tags",
        }
        assert stored["image"] == "images/1_abcdef12.jpg"
        assert stored["title_hindi"] == "कल बैठक होगी"
        assert len(stored["id"]) == 8
        assert store.commits[0][1] == "📰 Add news: Gram sabha tomorrow"

    def test_news_is_capped(self, store):
        store.put_json(NEWS_PATH, json.dumps(_items(NEWS_LIMIT)))

        add_news(store, ContentRecord.from_classification(_result()))

        stored = read_collection(store, NEWS_PATH)
        assert len(stored) == NEWS_LIMIT
        assert stored[-1]["id"] == f"old-{NEWS_LIMIT - 2}"

    def test_gallery_is_unbounded(self, store):
        store.put_json(GALLERY_PATH, json.dumps(_items(80)))
        record = GalleryRecord.from_classification(
            _result(category="heritage", title_english="Temple"), "images/1_abcdef12.jpg"
        )

        add_gallery_photo(store, record)

        stored = read_collection(store, GALLERY_PATH)
        assert len(stored) == 81
        assert stored[0]["path"] == "images/1_abcdef12.jpg"
        assert stored[0]["category"] == "heritage"
        assert store.commits[0][1] == "🖼️ Add gallery photo: Temple"

    def test_hindi_is_stored_unescaped(self, store):
        add_news(store, ContentRecord.from_classification(_result()))
        assert "कल बैठक होगी" in store.files[NEWS_PATH].decode("utf-8")
