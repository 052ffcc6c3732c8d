from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from sewa_bot.services.github import ContentStore, StaleVersionError

NEWS_PATH = "data/news.json"
GALLERY_PATH = "data/gallery.json"

NEWS_LIMIT = 50
# TODO: decide on a cap for data/gallery.json once the site pages through it.
GALLERY_LIMIT: Optional[int] = None


def parse_collection(content: Optional[str]) -> List[Dict[str, Any]]:
    """
    Decode a collection file. Missing, unreadable or non-list content is
    treated as an empty collection.
    """
    if not content:
        return []
    try:
        data = json.loads(content)
    except ValueError:
        logging.warning("[CONTENT] collection file is not valid JSON; starting empty")
        return []
    if not isinstance(data, list):
        logging.warning("[CONTENT] collection file is not a list; starting empty")
        return []
    return data


def dump_collection(items: List[Dict[str, Any]]) -> str:
    return json.dumps(items, ensure_ascii=False, indent=2)


def prepend_capped(
    items: List[Dict[str, Any]],
    item: Dict[str, Any],
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """Newest first; anything past `limit` (the oldest) falls off."""
    updated = [item] + list(items)
    if limit is not None:
        updated = updated[:limit]
    return updated


def _read_modify_write(store, path, item, message, limit):
    content, sha = store.read(path)
    updated = prepend_capped(parse_collection(content), item, limit)
    store.write(path, dump_collection(updated), message, sha=sha)
    return updated


def append_record(
    store: ContentStore,
    path: str,
    item: Dict[str, Any],
    message: str,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    """
    Read-modify-write one record into a collection file.

    The write carries the sha that was read. If another writer committed
    in between, GitHub rejects it and the whole cycle runs once more on
    the fresh version; a second rejection propagates.
    """
    try:
        return _read_modify_write(store, path, item, message, limit)
    except StaleVersionError:
        logging.warning("[CONTENT] %s changed during update; retrying once", path)
    return _read_modify_write(store, path, item, message, limit)


def read_collection(store: ContentStore, path: str) -> List[Dict[str, Any]]:
    content, _ = store.read(path)
    return parse_collection(content)


def add_news(store: ContentStore, record) -> List[Dict[str, Any]]:
    return append_record(
        store,
        NEWS_PATH,
        record.to_dict(),
        f"📰 Add news: {record.title_english[:50]}",
        limit=NEWS_LIMIT,
    )


def add_gallery_photo(store: ContentStore, record) -> List[Dict[str, Any]]:
    return append_record(
        store,
        GALLERY_PATH,
        record.to_dict(),
        f"🖼️ Add gallery photo: {record.title_english[:30]}",
        limit=GALLERY_LIMIT,
    )
