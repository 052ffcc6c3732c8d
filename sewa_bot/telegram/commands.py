# sewa_bot/telegram/commands.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from sewa_bot.content.datafiles import NEWS_PATH, read_collection
from sewa_bot.utils.time import display_datetime, parse_iso

from . import ux

if TYPE_CHECKING:
    from sewa_bot.pipeline import ContentPipeline, InboundMessage

RECENT_LIMIT = 5


def status_reply(pipeline: "ContentPipeline") -> str:
    try:
        repo = pipeline.store.get_repository()
    except Exception as e:  # noqa: BLE001
        logging.error("[COMMAND] status check failed: %s", e)
        return ux.build_failure(ux.STATUS_FAILURE, e)

    updated_at = repo.get("updated_at")
    last_updated = display_datetime(parse_iso(updated_at)) if updated_at else "—"
    return ux.build_status(
        repo.get("full_name", pipeline.store.full_name),
        last_updated,
        pipeline.classifier.configured_providers(),
    )


def recent_reply(pipeline: "ContentPipeline", message: "InboundMessage") -> str:
    rejected = pipeline.authorize(message)
    if rejected:
        return rejected.reply
    try:
        items = read_collection(pipeline.store, NEWS_PATH)
    except Exception as e:  # noqa: BLE001
        logging.error("[COMMAND] recent failed: %s", e)
        return ux.build_failure(ux.RECENT_FAILURE, e)
    return ux.build_recent(items[:RECENT_LIMIT])


def handle_command(pipeline: "ContentPipeline", message: "InboundMessage") -> Optional[str]:
    """
    Reply text for a bot command, or None for commands the bot does not know
    (those are ignored, never classified).
    """
    command = message.command
    if command == "start":
        return ux.build_welcome(pipeline.settings.website_url)
    if command == "help":
        return ux.build_help()
    if command == "status":
        return status_reply(pipeline)
    if command == "recent":
        return recent_reply(pipeline, message)
    return None
