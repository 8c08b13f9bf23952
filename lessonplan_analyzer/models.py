from __future__ import annotations
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Objective(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = ""
    level: str = ""          # Bloom's taxonomy level
    formulation: str = ""
    evaluation: str = ""

    @field_validator("level", "formulation", "evaluation", mode="before")
    @classmethod
    def _none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v


class LessonPlan(BaseModel):
    """
    Partial lesson plan as extracted by the generation service.

    Attributes are snake_case; the camelCase aliases are the names used in the
    response schema and in to_payload(). Both are accepted on input.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    lesson_title: Optional[str] = Field(None, alias="lessonTitle")
    subject: Optional[str] = None
    grade: Optional[str] = None
    teaching_methods: Optional[List[str]] = Field(None, alias="teachingMethods")
    teaching_aids: Optional[List[str]] = Field(None, alias="teachingAids")
    lesson_intro: Optional[str] = Field(None, alias="lessonIntro")
    intro_type: Optional[str] = Field(None, alias="introType")
    cognitive_objectives: List[Objective] = Field(default_factory=list, alias="cognitiveObjectives")
    psychomotor_objectives: List[Objective] = Field(default_factory=list, alias="psychomotorObjectives")
    affective_objectives: List[Objective] = Field(default_factory=list, alias="affectiveObjectives")
    teacher_role: Optional[str] = Field(None, alias="teacherRole")
    student_role: Optional[str] = Field(None, alias="studentRole")
    lesson_content: Optional[str] = Field(None, alias="lessonContent")
    lesson_closure: Optional[str] = Field(None, alias="lessonClosure")
    homework: Optional[str] = None

    @field_validator(
        "cognitive_objectives", "psychomotor_objectives", "affective_objectives",
        mode="before",
    )
    @classmethod
    def _missing_list_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    def all_objectives(self) -> List[Objective]:
        return self.cognitive_objectives + self.psychomotor_objectives + self.affective_objectives

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict using the wire (camelCase) names, unset fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)
