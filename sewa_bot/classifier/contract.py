from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

CATEGORIES = (
    "news",
    "event",
    "gallery",
    "document",
    "heritage",
    "emergency",
    "contact",
    "announcement",
)

PRIORITIES = ("high", "medium", "low")

TITLE_LIMIT = 50


def default_category(has_image: bool) -> str:
    return "gallery" if has_image else "news"


@dataclass
class ClassificationResult:
    """
    Python representation of one classification.

    Built fresh for every inbound message and consumed straight away to
    build a news or gallery record; never cached.
    """
    category: str
    title_hindi: str
    title_english: str
    description_hindi: str
    description_english: str
    suggested_section: str = "general"
    priority: str = "medium"
    tags: List[str] = field(default_factory=list)

    @classmethod
    def fallback(cls, text: str, has_image: bool) -> "ClassificationResult":
        """
        Deterministic result used when no provider produced a usable answer.
        """
        text = text or ""
        return cls(
            category=default_category(has_image),
            title_hindi=text[:TITLE_LIMIT],
            title_english=text[:TITLE_LIMIT],
            description_hindi=text,
            description_english=text,
            suggested_section="general",
            priority="medium",
            tags=[],
        )

    @classmethod
    def from_raw(cls, raw: Dict[str, Any], text: str, has_image: bool) -> "ClassificationResult":
        """
        Build from a provider's JSON object, filling gaps from the raw text.
        """
        base = cls.fallback(text, has_image)

        category = str(raw.get("category") or "").strip().lower()
        if category not in CATEGORIES:
            category = base.category

        priority = str(raw.get("priority") or "").strip().lower()
        if priority not in PRIORITIES:
            priority = "medium"

        tags = raw.get("tags") or []
        if isinstance(tags, str):
            tags = [tags]
        seen: List[str] = []
        for tag in tags:
            tag = str(tag).strip()
            if tag and tag not in seen:
                seen.append(tag)

        def _text(key: str, default: str) -> str:
            value = raw.get(key)
            if value is None:
                return default
            value = str(value).strip()
            return value or default

        return cls(
            category=category,
            title_hindi=_text("title_hindi", base.title_hindi),
            title_english=_text("title_english", base.title_english),
            description_hindi=_text("description_hindi", base.description_hindi),
            description_english=_text("description_english", base.description_english),
            suggested_section=_text("suggested_section", base.suggested_section),
            priority=priority,
            tags=seen,
        )
