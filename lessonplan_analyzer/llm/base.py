from __future__ import annotations
from typing import Any, Dict, Protocol

class GenerativeTextClient(Protocol):
    model: str

    def generate_json(self, prompt: str, schema: Dict[str, Any]) -> str:
        """Return the raw reply text, expected to be a JSON document matching schema."""
        ...
