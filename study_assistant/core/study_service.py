"""
AI content service: turns (subject, topic) into a validated StudyMaterials document.
"""
import asyncio
import logging
from typing import Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from pydantic import ValidationError as PydanticValidationError

from study_assistant.core.errors import ConfigurationError, ServiceError
from study_assistant.core.llm_utils import create_llm, extract_text, parse_json_object
from study_assistant.core.prompts import STUDY_MATERIALS_SYSTEM_PROMPT, get_study_materials_prompt
from study_assistant.core.schemas import StudyMaterials

logger = logging.getLogger(__name__)


class StudyMaterialsService:
    """
    Generates study materials with a chat model.

    Either returns a complete StudyMaterials or raises ServiceError; partially
    populated documents never leave this class.
    """

    def __init__(self, llm: BaseChatModel, timeout: Optional[float] = 60):
        """
        Initialize the service.

        Args:
            llm: Chat model used for generation
            timeout: Seconds to wait for one generation call (None waits forever)
        """
        self.llm = llm
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "StudyMaterialsService":
        """Build the service from a settings module or object."""
        api_key = getattr(config, 'API_KEY', None)
        if not api_key:
            raise ConfigurationError("API_KEY is missing. Cannot fetch study materials.")

        timeout = getattr(config, 'REQUEST_TIMEOUT_SECONDS', 60)
        llm = create_llm(
            api_key=api_key,
            model=getattr(config, 'LLM_MODEL', 'gemini-2.5-flash'),
            temperature=getattr(config, 'LLM_TEMPERATURE', 0.7),
            timeout=timeout,
        )
        logger.info(f"Study materials service using {getattr(config, 'LLM_MODEL', 'gemini-2.5-flash')}")
        return cls(llm, timeout=timeout)

    async def generate(self, subject: str, topic: str) -> StudyMaterials:
        """
        Generate study materials for a topic.

        Args:
            subject: Subject area
            topic: Topic within the subject

        Returns:
            Validated StudyMaterials

        Raises:
            ServiceError: On provider failure, timeout, or malformed output
        """
        messages = [
            SystemMessage(content=STUDY_MATERIALS_SYSTEM_PROMPT),
            HumanMessage(content=get_study_materials_prompt(subject, topic)),
        ]

        try:
            response = await asyncio.wait_for(self.llm.ainvoke(messages), timeout=self.timeout)
        except asyncio.TimeoutError:
            raise ServiceError(
                f"The AI service did not respond within {self.timeout:g} seconds. Please try again."
            )
        except Exception as e:
            raise ServiceError(f"Failed to generate study materials: {e}") from e

        text = extract_text(response).strip()
        if not text:
            raise ServiceError("The AI service returned an empty response.")

        return self.parse_materials(text)

    @staticmethod
    def parse_materials(text: str) -> StudyMaterials:
        """
        Parse and validate raw model output.

        Raises:
            ServiceError: If the text is not a JSON object of the expected shape
        """
        try:
            data = parse_json_object(text)
        except ValueError as e:
            logger.warning(f"Unparseable model output ({len(text)} chars): {text[:200]!r}")
            raise ServiceError(f"Failed to parse study materials from the AI response: {e}") from e

        try:
            return StudyMaterials.model_validate(data)
        except PydanticValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'document'}: {err['msg']}"
                for err in e.errors()[:3]
            )
            raise ServiceError(
                f"The AI response did not match the expected study material format ({problems})."
            ) from e
