"""
Content ingestion pipeline.

One inbound Telegram message runs through a fixed sequence of stages:

    received → authorized → (download) → classify → (optimize) → persist → acknowledged

Any stage may fail; the failure is caught at the handler boundary and
turned into a single error reply. Nothing is retried and nothing already
committed is rolled back.
"""

from .models import InboundMessage, PipelineOutcome, Stage
from .orchestrator import ContentPipeline

__all__ = [
    "ContentPipeline",
    "InboundMessage",
    "PipelineOutcome",
    "Stage",
]
