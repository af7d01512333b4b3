"""
Request state for the study material fetch lifecycle.

Exactly one of Idle, Loading, Success or Failure is active at a time.
"""
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from study_assistant.core.schemas import StudyMaterials


class _State(BaseModel):
    model_config = ConfigDict(frozen=True)


class Idle(_State):
    """Nothing requested yet, or the session was reset."""
    status: Literal["idle"] = "idle"


class Loading(_State):
    """A request has been issued and its result is pending."""
    status: Literal["loading"] = "loading"


class Success(_State):
    """The service returned a complete study document."""
    status: Literal["success"] = "success"
    materials: StudyMaterials


class Failure(_State):
    """The request failed; message is shown to the user."""
    status: Literal["failure"] = "failure"
    message: str = Field(min_length=1)


RequestState = Union[Idle, Loading, Success, Failure]
