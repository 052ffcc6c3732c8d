"""
Website data files kept in the content repository.

- data/news.json: ContentRecord list, newest first, at most 50 items
- data/gallery.json: GalleryRecord list, newest first, no cap
"""

from .records import ContentRecord, GalleryRecord
from .datafiles import GALLERY_PATH, NEWS_LIMIT, NEWS_PATH

__all__ = [
    "ContentRecord",
    "GalleryRecord",
    "GALLERY_PATH",
    "NEWS_LIMIT",
    "NEWS_PATH",
]
