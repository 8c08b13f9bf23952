"""
Errors raised by LessonPlanAnalyzer.analyze.

Every failure of a single analysis call is terminal; callers can catch
AnalysisError to handle all of them at once.
"""
from __future__ import annotations

MISSING_API_KEY_MESSAGE = (
    "لم يتم العثور على مفتاح الواجهة البرمجية (API Key). "
    "يرجى التأكد من إعداده في متغيرات البيئة الخاصة بنشر التطبيق."
)

SERVICE_FAILURE_MESSAGE = "Failed to analyze lesson plan with Gemini."


class AnalysisError(Exception):
    """Base class for lesson plan analysis failures."""


class ConfigurationError(AnalysisError):
    """No API key configured. Raised before any network activity."""

    def __init__(self, message: str = MISSING_API_KEY_MESSAGE):
        super().__init__(message)


class TransportOrServiceError(AnalysisError):
    """The remote call failed or returned no usable content."""

    def __init__(self, message: str = SERVICE_FAILURE_MESSAGE):
        super().__init__(message)


class ResponseFormatError(AnalysisError):
    """The reply was not a JSON document of the expected shape."""
