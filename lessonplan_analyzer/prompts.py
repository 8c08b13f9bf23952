"""
Instruction text and response schema sent to the generation service.

Filling in fields the lesson text does not mention is asked of the model in
the prompt; nothing in this package invents content locally.
"""
from __future__ import annotations
from typing import Any, Dict

# Gemini schema types (OpenAPI subset, upper-case names)
STRING = "STRING"
ARRAY = "ARRAY"
OBJECT = "OBJECT"

OBJECTIVE_FIELDS = ("cognitiveObjectives", "psychomotorObjectives", "affectiveObjectives")

OBJECTIVE_ID_PREFIXES = {
    "cognitiveObjectives": "cog",
    "psychomotorObjectives": "psy",
    "affectiveObjectives": "aff",
}

OBJECTIVE_SCHEMA: Dict[str, Any] = {
    "type": OBJECT,
    "properties": {
        "level": {"type": STRING, "description": "The Bloom's Taxonomy level of the objective."},
        "formulation": {"type": STRING, "description": "The exact wording of the behavioral objective."},
        "evaluation": {"type": STRING, "description": "The method or question to evaluate if the objective was met."},
    },
    "required": ["level", "formulation", "evaluation"],
}


def _text(description: str) -> Dict[str, Any]:
    return {"type": STRING, "description": description}


def _text_list(description: str) -> Dict[str, Any]:
    return {"type": ARRAY, "items": {"type": STRING}, "description": description}


def _objective_list(description: str) -> Dict[str, Any]:
    return {"type": ARRAY, "items": OBJECTIVE_SCHEMA, "description": description}


RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": OBJECT,
    "properties": {
        "lessonTitle": _text("The main title of the lesson."),
        "subject": _text("The subject matter (e.g., 'اللغة العربية')."),
        "grade": _text("The target grade level (e.g., 'الصف الخامس الابتدائي')."),
        "teachingMethods": _text_list("List of teaching methods and strategies used."),
        "teachingAids": _text_list("List of teaching aids or materials mentioned."),
        "lessonIntro": _text("A summary of the lesson's introduction or warm-up activity."),
        "introType": _text("The type of introduction (e.g., 'سؤال', 'قصة')."),
        "cognitiveObjectives": _objective_list("List of cognitive objectives from the lesson plan."),
        "psychomotorObjectives": _objective_list("List of psychomotor (skill-based) objectives."),
        "affectiveObjectives": _objective_list("List of affective (emotional/value-based) objectives."),
        "teacherRole": _text("A summary of the teacher's role during the lesson."),
        "studentRole": _text("A summary of the student's role during the lesson."),
        "lessonContent": _text("A detailed summary of the core content and activities of the lesson."),
        "lessonClosure": _text("A summary of the lesson's closing activity."),
        "homework": _text("The homework assignment given to students."),
    },
}

_PROMPT = """\
You are an expert educational assistant specializing in analyzing and structuring lesson plans for Yemeni teachers.
Your task is to analyze the following lesson plan text and extract the required information into a structured JSON format.
You must analyze the provided lesson text and fill in all fields in the JSON schema. \
If a specific detail (like 'teaching aids' or 'teacher role') is missing from the text, you MUST infer and generate \
appropriate content based on the lesson's subject, grade level, and topic. For example, for a 5th-grade Arabic lesson \
about poetry, you might suggest 'whiteboard, markers, poetry anthology' as teaching aids. Do not leave any fields empty; \
provide logical and relevant suggestions for all of them. Ensure the objectives you generate are well-formed and \
appropriate for the lesson.

The lesson plan is:
---
{lesson_text}
---
Please extract the information according to the provided JSON schema.
"""


def build_prompt(lesson_text: str) -> str:
    return _PROMPT.format(lesson_text=lesson_text)
