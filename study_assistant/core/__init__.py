"""
Core request lifecycle: data model, AI content service and controller.
"""

from .errors import StudyAssistantError, ConfigurationError, ServiceError, ValidationError
from .schemas import (
    StudyTool,
    StudyRequest,
    StudyMaterials,
    DiagramSuggestion,
    MultipleChoiceQuestion,
    VisualResource,
)
from .state import Idle, Loading, Success, Failure, RequestState
from .study_service import StudyMaterialsService
from .controller import RequestLifecycleController

__all__ = [
    "StudyAssistantError",
    "ConfigurationError",
    "ServiceError",
    "ValidationError",
    "StudyTool",
    "StudyRequest",
    "StudyMaterials",
    "DiagramSuggestion",
    "MultipleChoiceQuestion",
    "VisualResource",
    "Idle",
    "Loading",
    "Success",
    "Failure",
    "RequestState",
    "StudyMaterialsService",
    "RequestLifecycleController",
]
