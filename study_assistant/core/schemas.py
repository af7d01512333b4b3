"""
Pydantic models for study requests and generated study materials.

The model answers with camelCase JSON keys; fields are snake_case in Python
and accept either spelling.
"""

from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from study_assistant.core.errors import ValidationError


class StudyTool(str, Enum):
    """Views available over a StudyMaterials document."""
    DETAILED_SUMMARY = "Detailed Summary"
    TEXTUAL_MIND_MAP = "Textual Mind Map"
    DIAGRAM_SUGGESTIONS = "Diagram Suggestions"
    MNEMONICS = "Memory Shortcuts"
    QUIZ = "Quiz"
    VISUAL_RESOURCES = "Visual Resources"
    EXTRA_TIPS = "Extra Tips"


class StudyRequest(BaseModel):
    """A validated (subject, topic) pair. Immutable once issued."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    subject: str = Field(min_length=1)
    topic: str = Field(min_length=1)

    @classmethod
    def from_input(cls, subject: Optional[str], topic: Optional[str]) -> "StudyRequest":
        """
        Build a request from raw form input.

        Raises:
            ValidationError: If either field is missing or blank
        """
        subject = (subject or "").strip()
        topic = (topic or "").strip()
        if not subject and not topic:
            raise ValidationError("Please enter both a subject and a topic.")
        if not subject:
            raise ValidationError("Please enter a subject.")
        if not topic:
            raise ValidationError("Please enter a topic.")
        return cls(subject=subject, topic=topic)


class _MaterialsModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class DiagramSuggestion(_MaterialsModel):
    """A diagram the student could draw, with the steps to build it."""
    name: str
    description: str
    steps: List[str] = Field(default_factory=list)


class MultipleChoiceQuestion(_MaterialsModel):
    """Quiz question keyed by option letter."""
    question: str
    options: Dict[str, str]
    correct_answer_key: str = Field(alias="correctAnswerKey")
    explanation: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _match_answer_key_case(cls, data):
        """Map an answer key like "b" onto the option key "B"."""
        if not isinstance(data, dict):
            return data
        key_name = "correctAnswerKey" if "correctAnswerKey" in data else "correct_answer_key"
        key = data.get(key_name)
        options = data.get("options")
        if isinstance(key, str) and isinstance(options, dict) and key not in options:
            for option_key in options:
                if str(option_key).strip().lower() == key.strip().lower():
                    return {**data, key_name: option_key}
        return data

    @model_validator(mode="after")
    def _check_answer_key(self) -> "MultipleChoiceQuestion":
        if not self.options:
            raise ValueError("question has no options")
        if self.correct_answer_key not in self.options:
            raise ValueError(
                f"correct answer '{self.correct_answer_key}' is not one of the options "
                f"{sorted(self.options)}"
            )
        return self


class VisualResource(_MaterialsModel):
    """Link to a video or image about the topic."""
    title: str
    url: str
    kind: Literal["video", "image"] = Field(alias="type")

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, value):
        return value.lower().strip() if isinstance(value, str) else value


class StudyMaterials(_MaterialsModel):
    """Complete study document produced by the AI content service."""
    detailed_summary: str = Field(alias="detailedSummary")
    textual_mind_map: str = Field(alias="textualMindMap")
    diagram_suggestions: List[DiagramSuggestion] = Field(alias="diagramSuggestions")
    mnemonics: List[str]
    multiple_choice_questions: List[MultipleChoiceQuestion] = Field(alias="multipleChoiceQuestions")
    visual_resources: Optional[List[VisualResource]] = Field(default=None, alias="visualResources")
    extra_tips: List[str] = Field(alias="extraTips")
