"""Shared fixtures: isolated environment and fake Gemini replies."""
import json
from unittest.mock import MagicMock

import pytest

from lessonplan_analyzer.config import AnalyzerConfig, GeminiConfig

ENV_KEYS = (
    "GEMINI_API_KEY",
    "API_KEY",
    "GEMINI_MODEL",
    "GEMINI_ENDPOINT",
    "GEMINI_TIMEOUT_S",
    "LESSONPLAN_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(request, monkeypatch):
    """Keep the developer's real credentials out of unit tests."""
    if request.node.get_closest_marker("live"):
        yield
        return
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture
def config() -> AnalyzerConfig:
    return AnalyzerConfig(gemini=GeminiConfig(api_key="test-key"))


def gemini_response(text: str) -> MagicMock:
    """A requests.Response stand-in carrying `text` as the first candidate."""
    resp = MagicMock()
    resp.status_code = 200
    resp.raise_for_status.return_value = None
    resp.json.return_value = {
        "candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}]
    }
    return resp


def objective(level: str = "تذكر") -> dict:
    return {
        "level": level,
        "formulation": "أن يذكر التلميذ اسم الشاعر",
        "evaluation": "من هو شاعر القصيدة؟",
    }


@pytest.fixture
def full_reply() -> str:
    return json.dumps(
        {
            "lessonTitle": "قصيدة الوطن",
            "subject": "اللغة العربية",
            "grade": "الصف الخامس الابتدائي",
            "teachingMethods": ["الحوار والمناقشة"],
            "teachingAids": ["السبورة", "الأقلام الملونة"],
            "lessonIntro": "سؤال عن حب الوطن",
            "introType": "سؤال",
            "cognitiveObjectives": [objective("تذكر"), objective("فهم")],
            "psychomotorObjectives": [objective("تطبيق")],
            "affectiveObjectives": [objective("تقدير"), objective("استجابة"), objective("تقييم")],
            "teacherRole": "موجه",
            "studentRole": "مشارك",
            "lessonContent": "قراءة القصيدة وشرح المفردات",
            "lessonClosure": "تلخيص الأفكار",
            "homework": "حفظ الأبيات الأولى",
        },
        ensure_ascii=False,
    )
