import logging

from sewa_bot.config import Settings
from sewa_bot.main import create_app
from sewa_bot.pipeline import ContentPipeline

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s:%(message)s")

# === CONFIG ===
settings = Settings.from_env()
settings.validate()

pipeline = ContentPipeline.from_settings(settings)
app = create_app(settings, pipeline)

# === WEBHOOK REGISTRATION ===
if settings.webhook_url:
    pipeline.telegram.set_webhook(settings.webhook_url.rstrip("/") + "/webhook")

logging.info("🚀 SEWA Village Agentic AI ready, classifiers: %s",
             ", ".join(pipeline.classifier.configured_providers()) or "default only")


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=settings.port)
