from __future__ import annotations
import logging
from ..config import AnalyzerConfig
from ..errors import ConfigurationError
from .gemini import GeminiLLM

logger = logging.getLogger(__name__)


def make_llm(cfg: AnalyzerConfig) -> GeminiLLM:
    g = cfg.gemini
    if not g.has_api_key():
        logger.error("API key is not defined. Set GEMINI_API_KEY (or API_KEY) in the environment.")
        raise ConfigurationError()
    return GeminiLLM(
        api_key=g.api_key.strip(),
        model=g.model,
        endpoint=g.endpoint,
        timeout_s=g.timeout_s,
    )
