import os
import uuid

from sewa_bot.utils.time import epoch_ms

IMAGES_DIR = "images"
DOCUMENTS_DIR = "documents"


def short_id() -> str:
    """First 8 hex characters of a UUID4."""
    return uuid.uuid4().hex[:8]


def image_filename() -> str:
    """e.g. 1760775000123_a1b2c3d4.jpg"""
    return f"{epoch_ms()}_{short_id()}.jpg"


def image_path(filename: str) -> str:
    return f"{IMAGES_DIR}/{filename}"


def document_filename(original) -> str:
    """
    Base name of the uploaded file. Same name → same path, so a re-upload
    replaces the earlier document.
    """
    name = os.path.basename((original or "").replace("\\", "/")).strip()
    if not name or name in {".", ".."}:
        return f"document_{epoch_ms()}"
    return name


def document_path(filename: str) -> str:
    return f"{DOCUMENTS_DIR}/{filename}"
