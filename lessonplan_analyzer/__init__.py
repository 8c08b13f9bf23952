from .analyzer import LessonPlanAnalyzer, analyze_lesson_plan
from .errors import (
    AnalysisError,
    ConfigurationError,
    ResponseFormatError,
    TransportOrServiceError,
)
from .models import LessonPlan, Objective

__all__ = [
    "LessonPlanAnalyzer",
    "analyze_lesson_plan",
    "AnalysisError",
    "ConfigurationError",
    "ResponseFormatError",
    "TransportOrServiceError",
    "LessonPlan",
    "Objective",
]
