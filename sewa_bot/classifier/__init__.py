"""
SEWA content classifier.

Turns a free-text admin message into a ClassificationResult:
- category / priority / tags used to route and badge the item
- Hindi and English title + description shown on the website

Providers are tried in a fixed order (OpenAI, Gemini) and the chain ends
in a deterministic default, so classification never fails.
"""

from .contract import CATEGORIES, PRIORITIES, ClassificationResult
from .classifier import ContentClassifier
from .prompts import build_prompt
from .providers import extract_json_object

__all__ = [
    "CATEGORIES",
    "PRIORITIES",
    "ClassificationResult",
    "ContentClassifier",
    "build_prompt",
    "extract_json_object",
]
