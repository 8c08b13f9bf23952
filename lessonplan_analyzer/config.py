from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field

class GeminiConfig(BaseModel):
    model: str = "gemini-2.5-flash"
    endpoint: str = "https://generativelanguage.googleapis.com/v1beta"
    # Prefer GEMINI_API_KEY / API_KEY in the environment over putting this in YAML
    api_key: Optional[str] = None
    timeout_s: Optional[float] = None  # None = wait for the service

    def has_api_key(self) -> bool:
        return bool(self.api_key and self.api_key.strip())

class LoggingConfig(BaseModel):
    level: str = "INFO"

class AnalyzerConfig(BaseModel):
    gemini: GeminiConfig = Field(default_factory=GeminiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
