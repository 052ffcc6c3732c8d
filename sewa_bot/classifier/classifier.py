from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .contract import ClassificationResult
from .providers import (
    ClassificationProvider,
    DefaultProvider,
    GeminiProvider,
    OpenAIProvider,
)


class ContentClassifier:
    """
    Tries each configured provider in order and returns the first usable
    result. The chain always ends in DefaultProvider, so `classify` never
    raises.
    """

    def __init__(self, providers: Optional[Sequence[ClassificationProvider]] = None):
        chain: List[ClassificationProvider] = list(providers or [])
        if not any(isinstance(p, DefaultProvider) for p in chain):
            chain.append(DefaultProvider())
        self.providers = chain

    @classmethod
    def from_settings(cls, settings) -> "ContentClassifier":
        return cls([
            OpenAIProvider(settings.openai_api_key, settings.openai_model, settings.http_timeout),
            GeminiProvider(settings.gemini_api_key, settings.gemini_model, settings.http_timeout),
        ])

    def configured_providers(self) -> List[str]:
        """Names of the language-model providers that have credentials."""
        return [
            p.name
            for p in self.providers
            if not isinstance(p, DefaultProvider) and p.is_configured()
        ]

    def classify(self, text: str, has_image: bool = False) -> ClassificationResult:
        for provider in self.providers:
            if not provider.is_configured():
                continue
            try:
                result = provider.classify(text, has_image)
            except Exception as e:  # noqa: BLE001
                logging.error("[CLASSIFIER] %s failed: %s", provider.name, e)
                continue
            logging.info("[CLASSIFIER] %s → %s", provider.name, result.category)
            return result

        # Only reachable if the default provider was replaced by a failing one.
        return ClassificationResult.fallback(text, has_image)
