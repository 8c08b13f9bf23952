"""
Config loader with environment variable override support.

Env vars override YAML values so the same configs/analyzer.yaml works both
locally and in deployment; the API key normally only lives in the environment.

Override keys (all optional):
  GEMINI_API_KEY           falls back to API_KEY
  GEMINI_MODEL             e.g. gemini-2.5-flash
  GEMINI_ENDPOINT          e.g. https://generativelanguage.googleapis.com/v1beta
  GEMINI_TIMEOUT_S         e.g. 60
  LESSONPLAN_LOG_LEVEL     e.g. DEBUG
"""
from __future__ import annotations

import os
from typing import Optional

import yaml
from .config import AnalyzerConfig


def _apply_env_overrides(raw: dict) -> dict:
    """Patch raw YAML dict with environment variable values where set."""

    def env(key: str, default=None):
        return os.environ.get(key, default)

    api_key = env("GEMINI_API_KEY") or env("API_KEY")
    if api_key:
        raw.setdefault("gemini", {})["api_key"] = api_key

    model = env("GEMINI_MODEL")
    if model:
        raw.setdefault("gemini", {})["model"] = model

    endpoint = env("GEMINI_ENDPOINT")
    if endpoint:
        raw.setdefault("gemini", {})["endpoint"] = endpoint

    timeout_s = env("GEMINI_TIMEOUT_S")
    if timeout_s:
        raw.setdefault("gemini", {})["timeout_s"] = timeout_s  # pydantic coerces and validates

    log_level = env("LESSONPLAN_LOG_LEVEL")
    if log_level:
        raw.setdefault("logging", {})["level"] = log_level

    return raw


def load_config(path: Optional[str] = None) -> AnalyzerConfig:
    raw: dict = {}
    if path:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    raw = _apply_env_overrides(raw)
    return AnalyzerConfig.model_validate(raw)
