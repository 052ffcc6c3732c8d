from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request

from sewa_bot import __version__
from sewa_bot.pipeline import ContentPipeline, InboundMessage
from sewa_bot.telegram.commands import handle_command
from sewa_bot.utils.time import utc_iso

api = Blueprint("api", __name__)

SERVICE_NAME = "SEWA Village Agentic AI"


def _pipeline() -> ContentPipeline:
    return current_app.extensions["sewa_pipeline"]


@api.route("/", methods=["GET"])
def index() -> Any:
    return jsonify({
        "name": SERVICE_NAME,
        "status": "running",
        "version": __version__,
        "website": _pipeline().settings.website_url,
    })


@api.route("/health", methods=["GET"])
def health() -> Any:
    return jsonify({"status": "healthy", "timestamp": utc_iso()})


@api.route("/webhook", methods=["POST"])
def webhook() -> Any:
    """
    Telegram webhook endpoint.

    Handles:
    - bot commands (/start, /help, /status, /recent)
    - text messages → news items
    - photos → images/ + gallery or news items
    - documents → documents/ + news items

    Always answers 200 so Telegram does not redeliver the update.
    """
    update: Dict[str, Any] = request.get_json(silent=True) or {}
    message = update.get("message")
    if not message:
        return jsonify({"ok": True})

    inbound = InboundMessage.from_update(message)
    if inbound is None:
        return jsonify({"ok": True})

    pipeline = _pipeline()

    if inbound.is_command:
        reply = handle_command(pipeline, inbound)
        if reply:
            pipeline.telegram.send_message(inbound.chat_id, reply)
        return jsonify({"ok": True})

    if inbound.kind == "text" and not inbound.text:
        return jsonify({"ok": True})

    outcome = pipeline.handle(inbound)
    if outcome is None:
        logging.info("[WEBHOOK] ignoring %s message from chat %s", inbound.kind, inbound.chat_id)
        return jsonify({"ok": True})

    pipeline.telegram.send_message(inbound.chat_id, outcome.reply)
    return jsonify({"ok": outcome.ok, "stage": outcome.stage.value})
