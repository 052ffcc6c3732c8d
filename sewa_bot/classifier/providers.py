from __future__ import annotations

import json
import re
from abc import ABC, abstractmethod
from typing import Any, Optional

import google.generativeai as genai
from openai import OpenAI

from .contract import ClassificationResult
from .prompts import build_prompt
from .validator import validate_classification

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


class ProviderError(RuntimeError):
    """A provider answered, but not with a usable classification."""


def extract_json_object(text: str) -> Optional[str]:
    """
    Return the JSON-object-shaped part of a free-form model answer
    (first '{' through last '}'), or None when there is none.
    """
    if not text:
        return None
    match = _JSON_OBJECT_RE.search(text)
    return match.group(0) if match else None


class ClassificationProvider(ABC):
    """One step of the classification chain."""

    name = "provider"

    def is_configured(self) -> bool:
        return True

    @abstractmethod
    def classify(self, text: str, has_image: bool) -> ClassificationResult:
        ...


class LLMProvider(ClassificationProvider):
    """
    Base for language-model providers.

    Subclasses only implement `_complete(prompt)`, returning the parsed
    JSON value; validation and shaping are shared.
    """

    def classify(self, text: str, has_image: bool) -> ClassificationResult:
        parsed = self._complete(build_prompt(text, has_image))
        is_valid, err = validate_classification(parsed)
        if not is_valid:
            raise ProviderError(f"{self.name} returned an invalid classification: {err}")
        return ClassificationResult.from_raw(parsed, text, has_image)

    @abstractmethod
    def _complete(self, prompt: str) -> Any:
        ...


class OpenAIProvider(LLMProvider):
    """Primary provider; supports constrained JSON output natively."""

    name = "OpenAI"

    def __init__(self, api_key: Optional[str], model: str = "gpt-4o-mini", timeout: float = 30.0):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._client: Optional[OpenAI] = None

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> OpenAI:
        # Lazily built so that constructing the provider never needs the network.
        if self._client is None:
            self._client = OpenAI(api_key=self.api_key, timeout=self.timeout)
        return self._client

    def _complete(self, prompt: str) -> Any:
        response = self._get_client().chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=0,
            response_format={"type": "json_object"},
        )
        content = response.choices[0].message.content
        if not content:
            raise ProviderError("OpenAI returned an empty response")
        return json.loads(content)


class GeminiProvider(LLMProvider):
    """
    Secondary provider. Gemini may wrap its JSON in prose or code fences,
    so the object is cut out of the free-form answer before parsing.
    """

    name = "Gemini"

    def __init__(self, api_key: Optional[str], model: str = "gemini-1.5-flash", timeout: float = 30.0):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout
        self._model = None

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _get_model(self):
        if self._model is None:
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(self.model)
        return self._model

    def _complete(self, prompt: str) -> Any:
        result = self._get_model().generate_content(
            prompt,
            request_options={"timeout": self.timeout},
        )
        raw = extract_json_object(result.text)
        if raw is None:
            raise ProviderError("Gemini response contained no JSON object")
        return json.loads(raw)


class DefaultProvider(ClassificationProvider):
    """End of the chain: never calls out and never fails."""

    name = "default"

    def classify(self, text: str, has_image: bool) -> ClassificationResult:
        return ClassificationResult.fallback(text, has_image)
