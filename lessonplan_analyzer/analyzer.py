"""
Lesson plan analyzer: free lesson text in, structured LessonPlan out.

One call to the generation service per analyze(); the reply is parsed as JSON,
objective lists are normalised and every objective gets a fresh local id.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from pydantic import ValidationError

from .config import AnalyzerConfig
from .config_loader import load_config
from .errors import AnalysisError, ResponseFormatError, TransportOrServiceError
from .llm.base import GenerativeTextClient
from .llm.factory import make_llm
from .models import LessonPlan
from .prompts import OBJECTIVE_FIELDS, OBJECTIVE_ID_PREFIXES, RESPONSE_SCHEMA, build_prompt
from .utils.ids import new_objective_id

logger = logging.getLogger(__name__)


class LessonPlanAnalyzer:
    """
    Usage:
        analyzer = LessonPlanAnalyzer()          # config from the environment
        plan = analyzer.analyze(lesson_text)
        plan.cognitive_objectives[0].id          # "cog-<uuid hex>"

    Pass `llm` to use a client other than the configured Gemini one.
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        llm: Optional[GenerativeTextClient] = None,
    ):
        self.config = config if config is not None else load_config()
        self._llm = llm

    def analyze(self, lesson_text: str) -> LessonPlan:
        # Credential check happens here, before any request is built
        llm = self._llm if self._llm is not None else make_llm(self.config)

        prompt = build_prompt(lesson_text)
        logger.debug("Analyzing lesson plan with %s (%d chars)", llm.model, len(lesson_text))
        try:
            raw = llm.generate_json(prompt, RESPONSE_SCHEMA)
        except AnalysisError:
            raise
        except Exception as e:
            logger.error("Error calling %s: %s", llm.model, e)
            raise TransportOrServiceError() from e

        data = parse_reply(raw)
        logger.debug("Received %d chars from %s", len(raw), llm.model)
        return build_lesson_plan(data)


def parse_reply(raw: str) -> Dict[str, Any]:
    if not isinstance(raw, str):
        logger.error("Reply is a %s, expected text", type(raw).__name__)
        raise ResponseFormatError("Gemini reply is not text.")
    try:
        data = json.loads(raw.strip())
    except json.JSONDecodeError as e:
        logger.error("Reply is not valid JSON: %s", e)
        raise ResponseFormatError(f"Gemini reply is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        logger.error("Reply JSON is a %s, expected an object", type(data).__name__)
        raise ResponseFormatError("Gemini reply is not a JSON object.")
    return data


def build_lesson_plan(data: Dict[str, Any]) -> LessonPlan:
    """Normalise objective lists, assign ids and validate into a LessonPlan."""
    data = dict(data)
    for field in OBJECTIVE_FIELDS:
        items = data.get(field)
        if items is None:
            items = []
        if not isinstance(items, list):
            logger.error("Reply field %s is a %s, expected a list", field, type(items).__name__)
            raise ResponseFormatError(f"Gemini reply field '{field}' is not a list.")
        prefix = OBJECTIVE_ID_PREFIXES[field]
        data[field] = [
            {**item, "id": new_objective_id(prefix)} if isinstance(item, dict) else item
            for item in items
        ]
    try:
        return LessonPlan.model_validate(data)
    except ValidationError as e:
        logger.error("Reply does not match the lesson plan shape: %s", e)
        raise ResponseFormatError(f"Gemini reply does not match the lesson plan shape: {e}") from e


def analyze_lesson_plan(lesson_text: str, config: Optional[AnalyzerConfig] = None) -> LessonPlan:
    """One-shot helper around LessonPlanAnalyzer."""
    return LessonPlanAnalyzer(config=config).analyze(lesson_text)
