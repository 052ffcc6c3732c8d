from __future__ import annotations

from typing import Optional

from flask import Flask

from sewa_bot.api.webhook import api
from sewa_bot.config import Settings
from sewa_bot.pipeline import ContentPipeline


def create_app(
    settings: Optional[Settings] = None,
    pipeline: Optional[ContentPipeline] = None,
) -> Flask:
    """
    Build the Flask app. The pipeline (and everything it talks to) is
    created once here and shared by every request.
    """
    if settings is None:
        settings = Settings.from_env()
        settings.validate()
    pipeline = pipeline or ContentPipeline.from_settings(settings)

    app = Flask(__name__)
    app.extensions["sewa_pipeline"] = pipeline
    app.register_blueprint(api)
    return app
