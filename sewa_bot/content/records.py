from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from sewa_bot.classifier.contract import ClassificationResult
from sewa_bot.media.naming import short_id
from sewa_bot.utils.time import display_date, epoch_ms


@dataclass
class ContentRecord:
    """
    One item of data/news.json.

    Field names are the keys the website's loader reads, so they stay in
    the snake_case Hindi/English form.
    """
    id: str
    date: str
    timestamp: int
    title_hindi: str
    title_english: str
    description_hindi: str
    description_english: str
    image: Optional[str]
    category: str
    priority: str
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_classification(
        cls,
        result: ClassificationResult,
        image: Optional[str] = None,
    ) -> "ContentRecord":
        return cls(
            id=short_id(),
            date=display_date(),
            timestamp=epoch_ms(),
            title_hindi=result.title_hindi,
            title_english=result.title_english,
            description_hindi=result.description_hindi,
            description_english=result.description_english,
            image=image,
            category=result.category,
            priority=result.priority,
            tags=list(result.tags),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class GalleryRecord:
    """One item of data/gallery.json."""
    id: str
    path: str
    title_hindi: str
    title_english: str
    category: str
    tags: List[str]
    timestamp: int
    date: str

    @classmethod
    def from_classification(cls, result: ClassificationResult, path: str) -> "GalleryRecord":
        return cls(
            id=short_id(),
            path=path,
            title_hindi=result.title_hindi,
            title_english=result.title_english,
            category=result.category,
            tags=list(result.tags),
            timestamp=epoch_ms(),
            date=display_date(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
