from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Stage(str, Enum):
    RECEIVED = "received"
    REJECTED = "rejected"
    DOWNLOADING = "downloading"
    CLASSIFYING = "classifying"
    PROCESSING = "processing"
    PERSISTING = "persisting"
    ACKNOWLEDGED = "acknowledged"


@dataclass
class InboundMessage:
    """
    The parts of a Telegram message the pipeline uses.

    Fields:
        kind: "text", "photo", "document", or "other".
        chat_id: Conversation to reply to.
        user_id: Sender, checked against the allow-list.
        text: Message text (text messages only).
        caption: Caption attached to a photo or document.
        photos: PhotoSize dicts as Telegram sends them (several resolutions).
        document: Document dict (file_id, file_name, mime_type, …).
    """

    kind: str
    chat_id: int | str
    user_id: Optional[int] = None
    text: str = ""
    caption: Optional[str] = None
    photos: List[Dict[str, Any]] = field(default_factory=list)
    document: Optional[Dict[str, Any]] = None

    @classmethod
    def from_update(cls, message: Dict[str, Any]) -> Optional["InboundMessage"]:
        chat_id = (message.get("chat") or {}).get("id")
        if chat_id is None:
            return None
        user_id = (message.get("from") or {}).get("id")
        caption = message.get("caption")

        if message.get("photo"):
            return cls("photo", chat_id, user_id, caption=caption, photos=list(message["photo"]))
        if message.get("document"):
            return cls("document", chat_id, user_id, caption=caption, document=dict(message["document"]))
        if "text" in message:
            return cls("text", chat_id, user_id, text=(message.get("text") or "").strip())
        return cls("other", chat_id, user_id)

    @property
    def is_command(self) -> bool:
        return self.kind == "text" and self.text.startswith("/")

    @property
    def command(self) -> Optional[str]:
        """'/status@sewa_ganv_bot extra' → 'status'."""
        if not self.is_command:
            return None
        head = self.text[1:].split(maxsplit=1)[0] if len(self.text) > 1 else ""
        return head.split("@", 1)[0].lower()

    def largest_photo(self) -> Dict[str, Any]:
        """Highest-resolution variant of a photo."""
        return max(
            self.photos,
            key=lambda p: (p.get("width", 0) * p.get("height", 0), p.get("file_size", 0)),
        )


@dataclass
class PipelineOutcome:
    """Result of handling one message: what to reply and how far it got."""

    ok: bool
    stage: Stage
    reply: str
    category: Optional[str] = None
    title: Optional[str] = None
    record_id: Optional[str] = None
    path: Optional[str] = None
    error: Optional[str] = None
