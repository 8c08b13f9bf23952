"""
Gemini adapter: a thin wrapper around the generateContent REST endpoint.

One call in, raw reply text out. Parsing the JSON is left to the caller.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests

from ..errors import TransportOrServiceError

logger = logging.getLogger(__name__)


class GeminiLLM:
    """
    Usage:
        llm = GeminiLLM(api_key="...")
        raw = llm.generate_json("Extract ...", {"type": "OBJECT", "properties": {...}})
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash",
        endpoint: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout_s: Optional[float] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.endpoint = endpoint.rstrip("/")
        self.timeout_s = timeout_s

    @property
    def url(self) -> str:
        return f"{self.endpoint}/models/{self.model}:generateContent"

    def generate_json(self, prompt: str, schema: Dict[str, Any]) -> str:
        """
        Single-turn generation constrained to application/json and the given schema.
        Raises TransportOrServiceError if the request fails or no text comes back.
        """
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseMimeType": "application/json",
                "responseSchema": schema,
            },
        }
        try:
            r = requests.post(
                self.url,
                json=payload,
                headers={"x-goog-api-key": self.api_key},
                timeout=self.timeout_s,
            )
            r.raise_for_status()
            data = r.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Error calling Gemini API: %s", e)
            raise TransportOrServiceError() from e

        text = self._extract_text(data)
        if text is None:
            logger.error(
                "Gemini returned no candidate text (promptFeedback=%s)",
                data.get("promptFeedback") if isinstance(data, dict) else None,
            )
            raise TransportOrServiceError()
        return text

    @staticmethod
    def _extract_text(data: Any) -> Optional[str]:
        if not isinstance(data, dict):
            return None
        candidates = data.get("candidates")
        if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
            return None
        content = candidates[0].get("content")
        if not isinstance(content, dict):
            return None
        parts = content.get("parts")
        if not isinstance(parts, list):
            return None
        texts = [p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str)]
        if not texts:
            return None
        return "".join(texts)
