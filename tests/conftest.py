"""Shared fixtures: settings, an in-memory GitHub store and a fake Telegram."""

from __future__ import annotations

import hashlib
import io
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import pytest
from PIL import Image

from sewa_bot.classifier import ClassificationResult, ContentClassifier
from sewa_bot.classifier.providers import ClassificationProvider
from sewa_bot.config import Settings
from sewa_bot.pipeline import ContentPipeline
from sewa_bot.services.github import ContentStoreError, StaleVersionError
from sewa_bot.services.telegram import TelegramError


class FakeContentStore:
    """
    In-memory stand-in for ContentStore that enforces version tokens the
    way the GitHub contents API does.
    """

    owner = "KUL236"
    repo = "sewa-digital-ganv"
    full_name = "KUL236/sewa-digital-ganv"

    def __init__(self) -> None:
        self.files: Dict[str, bytes] = {}
        self.commits: List[Tuple[str, str, Optional[str]]] = []
        self.reads: List[str] = []
        self.before_write: Optional[Callable[[str], None]] = None
        self.fail_writes_to: Dict[str, Exception] = {}
        self.repo_info: Dict[str, Any] = {
            "full_name": self.full_name,
            "updated_at": "2026-10-18T09:30:00Z",
        }

    @staticmethod
    def _sha(data: bytes) -> str:
        return hashlib.sha1(data).hexdigest()

    def put_json(self, path: str, text: str) -> None:
        self.files[path] = text.encode("utf-8")

    def read(self, path: str) -> Tuple[Optional[str], Optional[str]]:
        self.reads.append(path)
        if path not in self.files:
            return None, None
        data = self.files[path]
        return data.decode("utf-8"), self._sha(data)

    def get_version(self, path: str) -> Optional[str]:
        if path not in self.files:
            return None
        return self._sha(self.files[path])

    def write(self, path: str, content: Union[str, bytes], message: str, sha: Optional[str] = None) -> Dict[str, Any]:
        if self.before_write is not None:
            hook, self.before_write = self.before_write, None
            hook(path)
        if path in self.fail_writes_to:
            raise self.fail_writes_to[path]

        current = self.files.get(path)
        if current is None and sha:
            raise ContentStoreError(f"{path} not found", 404)
        if current is not None and not sha:
            raise StaleVersionError('"sha" wasn\'t supplied', 422)
        if current is not None and sha != self._sha(current):
            raise StaleVersionError(f"{path} does not match {sha}", 409)

        raw = content.encode("utf-8") if isinstance(content, str) else content
        self.files[path] = raw
        self.commits.append((path, message, sha))
        return {"content": {"path": path, "sha": self._sha(raw)}}

    def upload_media(self, path: str, data: bytes, message: str, overwrite: bool = False) -> str:
        sha = self.get_version(path) if overwrite else None
        self.write(path, data, message, sha=sha)
        return path

    def get_repository(self) -> Dict[str, Any]:
        return dict(self.repo_info)


class FakeTelegram:
    def __init__(self) -> None:
        self.sent: List[Tuple[Any, str]] = []
        self.files: Dict[str, bytes] = {}
        self.downloads: List[str] = []

    def send_message(self, chat_id, text: str) -> None:
        self.sent.append((chat_id, text))

    def download_file(self, file_id: str) -> bytes:
        self.downloads.append(file_id)
        if file_id not in self.files:
            raise TelegramError(f"getFile failed: file {file_id} not found")
        return self.files[file_id]

    def texts(self) -> List[str]:
        return [text for _, text in self.sent]


class FailingProvider(ClassificationProvider):
    name = "failing"

    def __init__(self) -> None:
        self.calls = 0

    def classify(self, text: str, has_image: bool) -> ClassificationResult:
        self.calls += 1
        raise RuntimeError("provider unavailable")


class StubProvider(ClassificationProvider):
    """Returns a fixed classification, filling titles from the text."""

    name = "stub"

    def __init__(self, **fields: Any) -> None:
        self.fields = fields
        self.calls: List[Tuple[str, bool]] = []

    def classify(self, text: str, has_image: bool) -> ClassificationResult:
        self.calls.append((text, has_image))
        return ClassificationResult.from_raw(dict(self.fields), text, has_image)


@pytest.fixture
def settings() -> Settings:
    return Settings(telegram_token="test-bot-token", github_token="test-gh-token")


@pytest.fixture
def store() -> FakeContentStore:
    return FakeContentStore()


@pytest.fixture
def telegram() -> FakeTelegram:
    return FakeTelegram()


@pytest.fixture
def make_pipeline(settings, store, telegram):
    def _make(*providers: ClassificationProvider, settings_override: Optional[Settings] = None) -> ContentPipeline:
        return ContentPipeline(
            settings=settings_override or settings,
            classifier=ContentClassifier(list(providers) or [FailingProvider()]),
            store=store,
            telegram=telegram,
        )

    return _make


def make_image_bytes(size=(640, 480), mode="RGB", fmt="JPEG") -> bytes:
    color = (200, 120, 40, 128) if mode == "RGBA" else (200, 120, 40)
    img = Image.new(mode, size, color)
    out = io.BytesIO()
    img.save(out, format=fmt)
    return out.getvalue()


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image_bytes()
