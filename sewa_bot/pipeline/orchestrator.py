from __future__ import annotations

import logging
from typing import Optional

from sewa_bot.classifier import ContentClassifier
from sewa_bot.config import Settings
from sewa_bot.content.datafiles import add_gallery_photo, add_news
from sewa_bot.content.records import ContentRecord, GalleryRecord
from sewa_bot.media import naming
from sewa_bot.media.processor import optimize_image
from sewa_bot.services.github import ContentStore
from sewa_bot.services.telegram import TelegramClient
from sewa_bot.telegram import ux

from .models import InboundMessage, PipelineOutcome, Stage

DEFAULT_PHOTO_CAPTION = "Village Photo"
GALLERY_CATEGORIES = {"gallery", "heritage"}


class ContentPipeline:
    """
    Turns admin messages into commits on the website repository.

    Each handler returns a PipelineOutcome and never raises: whatever goes
    wrong is reported back to the sender as one failure reply. Media that
    was already committed stays in place if a later stage fails.
    """

    def __init__(
        self,
        settings: Settings,
        classifier: ContentClassifier,
        store: ContentStore,
        telegram: TelegramClient,
    ):
        self.settings = settings
        self.classifier = classifier
        self.store = store
        self.telegram = telegram

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContentPipeline":
        return cls(
            settings=settings,
            classifier=ContentClassifier.from_settings(settings),
            store=ContentStore.from_settings(settings),
            telegram=TelegramClient.from_settings(settings),
        )

    # ------------------------------------------------------------------ #
    # Shared steps
    # ------------------------------------------------------------------ #
    def authorize(self, message: InboundMessage) -> Optional[PipelineOutcome]:
        """None if the sender may write; otherwise the rejection outcome."""
        if self.settings.is_admin(message.user_id):
            return None
        logging.info("[PIPELINE] rejected %s message from user %s", message.kind, message.user_id)
        return PipelineOutcome(ok=False, stage=Stage.REJECTED, reply=ux.NOT_AUTHORIZED_TEXT)

    def _failed(self, message: InboundMessage, stage: Stage, prefix: str, error: Exception) -> PipelineOutcome:
        logging.exception("[PIPELINE] %s handler failed while %s", message.kind, stage.value)
        return PipelineOutcome(
            ok=False,
            stage=stage,
            reply=ux.build_failure(prefix, error),
            error=str(error),
        )

    def handle(self, message: InboundMessage) -> Optional[PipelineOutcome]:
        if message.kind == "text":
            return self.handle_text(message)
        if message.kind == "photo":
            return self.handle_photo(message)
        if message.kind == "document":
            return self.handle_document(message)
        return None

    # ------------------------------------------------------------------ #
    # Text → news item
    # ------------------------------------------------------------------ #
    def handle_text(self, message: InboundMessage) -> PipelineOutcome:
        rejected = self.authorize(message)
        if rejected:
            return rejected

        stage = Stage.CLASSIFYING
        try:
            self.telegram.send_message(message.chat_id, ux.PROCESSING_TEXT)

            result = self.classifier.classify(message.text, has_image=False)

            stage = Stage.PERSISTING
            record = ContentRecord.from_classification(result)
            add_news(self.store, record)
        except Exception as e:  # noqa: BLE001
            return self._failed(message, stage, ux.TEXT_FAILURE, e)

        return PipelineOutcome(
            ok=True,
            stage=Stage.ACKNOWLEDGED,
            reply=ux.build_text_ack(result.category, result.title_hindi, record.id, self.settings.website_url),
            category=result.category,
            title=result.title_hindi,
            record_id=record.id,
        )

    # ------------------------------------------------------------------ #
    # Photo → image blob + gallery or news item
    # ------------------------------------------------------------------ #
    def handle_photo(self, message: InboundMessage) -> PipelineOutcome:
        rejected = self.authorize(message)
        if rejected:
            return rejected

        stage = Stage.DOWNLOADING
        try:
            self.telegram.send_message(message.chat_id, ux.PROCESSING_PHOTO_TEXT)

            photo = message.largest_photo()
            image_bytes = self.telegram.download_file(photo["file_id"])

            stage = Stage.CLASSIFYING
            caption = message.caption or DEFAULT_PHOTO_CAPTION
            result = self.classifier.classify(caption, has_image=True)

            stage = Stage.PROCESSING
            filename = naming.image_filename()
            optimized = optimize_image(image_bytes)

            stage = Stage.PERSISTING
            image_path = self.store.upload_media(
                naming.image_path(filename),
                optimized,
                f"📷 Add image: {filename}",
            )

            if result.category in GALLERY_CATEGORIES:
                record = GalleryRecord.from_classification(result, image_path)
                add_gallery_photo(self.store, record)
            else:
                record = ContentRecord.from_classification(result, image=image_path)
                add_news(self.store, record)
        except Exception as e:  # noqa: BLE001
            return self._failed(message, stage, ux.PHOTO_FAILURE, e)

        return PipelineOutcome(
            ok=True,
            stage=Stage.ACKNOWLEDGED,
            reply=ux.build_photo_ack(result.category, result.title_hindi, image_path, self.settings.website_url),
            category=result.category,
            title=result.title_hindi,
            record_id=record.id,
            path=image_path,
        )

    # ------------------------------------------------------------------ #
    # Document → raw blob + news item
    # ------------------------------------------------------------------ #
    def handle_document(self, message: InboundMessage) -> PipelineOutcome:
        rejected = self.authorize(message)
        if rejected:
            return rejected

        document = message.document or {}
        filename = naming.document_filename(document.get("file_name"))
        path = naming.document_path(filename)

        stage = Stage.DOWNLOADING
        try:
            self.telegram.send_message(message.chat_id, ux.PROCESSING_DOCUMENT_TEXT)

            data = self.telegram.download_file(document["file_id"])

            stage = Stage.PERSISTING
            # Same filename → same path: the newer upload replaces the older one.
            self.store.upload_media(path, data, f"📄 Add document: {filename}", overwrite=True)

            stage = Stage.CLASSIFYING
            result = self.classifier.classify(message.caption or filename, has_image=False)
            result.category = "document"

            stage = Stage.PERSISTING
            record = ContentRecord.from_classification(result)
            add_news(self.store, record)
        except Exception as e:  # noqa: BLE001
            return self._failed(message, stage, ux.DOCUMENT_FAILURE, e)

        return PipelineOutcome(
            ok=True,
            stage=Stage.ACKNOWLEDGED,
            reply=ux.build_document_ack(filename, path),
            category=result.category,
            title=result.title_hindi,
            record_id=record.id,
            path=path,
        )
