"""
Request lifecycle controller.

Owns the fetch state machine (idle -> loading -> success | failure -> idle on
reset) and mediates between the topic input, the AI content service and the
display. All transitions run on the event loop thread, so no locking is used.
"""
import asyncio
import logging
from typing import Optional, Protocol, Union

from study_assistant.core.errors import ConfigurationError
from study_assistant.core.schemas import StudyMaterials, StudyRequest, StudyTool
from study_assistant.core.state import Failure, Idle, Loading, RequestState, Success

logger = logging.getLogger(__name__)

MISSING_KEY_BANNER = (
    "API_KEY environment variable is not set. Please configure it to use the AI features."
)
MISSING_KEY_ON_SUBMIT = "API_KEY is missing. Cannot fetch study materials."
UNKNOWN_ERROR = "An unknown error occurred."
CANCELLED_MESSAGE = "The request was cancelled before it finished. Please submit again."


class MaterialsService(Protocol):
    async def generate(self, subject: str, topic: str) -> StudyMaterials:
        ...


class RequestLifecycleController:
    """
    Orchestrates one in-flight study materials request at a time.

    A new submit supersedes any pending one. Every submit and reset bumps a
    request sequence number; a response whose number is no longer current is
    discarded when it arrives.
    """

    def __init__(self, service: Optional[MaterialsService], api_key: Optional[str]):
        """
        Initialize controller.

        Args:
            service: AI content service (may be None when no credential is configured)
            api_key: API credential; its absence disables submission
        """
        self._service = service
        self._api_key = api_key
        self._sequence = 0
        self._state: RequestState = Idle()
        self._selected_tool: Optional[StudyTool] = None
        self._subject: Optional[str] = None
        self._topic: Optional[str] = None
        self._config_error: Optional[str] = None if self.has_credential else MISSING_KEY_BANNER

    # --- Read-only view -------------------------------------------------

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def selected_tool(self) -> Optional[StudyTool]:
        return self._selected_tool

    @property
    def subject(self) -> Optional[str]:
        return self._subject

    @property
    def topic(self) -> Optional[str]:
        return self._topic

    @property
    def sequence(self) -> int:
        return self._sequence

    @property
    def has_credential(self) -> bool:
        return bool(self._api_key) and self._service is not None

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def materials(self) -> Optional[StudyMaterials]:
        if isinstance(self._state, Success):
            return self._state.materials
        return None

    @property
    def error(self) -> Optional[str]:
        """Message for the error banner, if any."""
        if isinstance(self._state, Failure):
            return self._state.message
        return self._config_error

    # --- Operations -----------------------------------------------------

    def submit(self, subject: str, topic: str) -> "asyncio.Task[RequestState]":
        """
        Issue a new request.

        The state is Loading when this returns. The returned task applies the
        terminal transition and resolves to the state that is current after it.
        Must be called from a running event loop.

        Raises:
            ValidationError: If subject or topic is blank (state unchanged)
            ConfigurationError: If no credential is configured (state unchanged)
        """
        request = StudyRequest.from_input(subject, topic)

        if not self.has_credential:
            self._config_error = MISSING_KEY_ON_SUBMIT
            logger.warning("Submit rejected: no API credential configured")
            raise ConfigurationError(MISSING_KEY_ON_SUBMIT)

        if self.is_loading:
            logger.info(f"Request #{self._sequence} superseded by a new submit")

        self._sequence += 1
        sequence = self._sequence
        self._state = Loading()
        self._selected_tool = None
        self._subject = None
        self._topic = None
        self._config_error = None

        logger.info(f"Request #{sequence}: {request.subject} / {request.topic}")
        return asyncio.ensure_future(self._fetch(sequence, request))

    async def _fetch(self, sequence: int, request: StudyRequest) -> RequestState:
        try:
            materials = await self._service.generate(request.subject, request.topic)
        except asyncio.CancelledError:
            if sequence == self._sequence:
                logger.warning(f"Request #{sequence} was cancelled")
                self._state = Failure(message=CANCELLED_MESSAGE)
            raise
        except Exception as e:
            if sequence != self._sequence:
                logger.info(f"Discarding failure of stale request #{sequence}: {e}")
                return self._state
            message = str(e) or UNKNOWN_ERROR
            logger.error(f"Request #{sequence} failed: {message}")
            self._state = Failure(message=message)
            return self._state

        if sequence != self._sequence:
            logger.info(f"Discarding result of stale request #{sequence}")
            return self._state

        self._state = Success(materials=materials)
        self._subject = request.subject
        self._topic = request.topic
        logger.info(
            f"Request #{sequence} succeeded with "
            f"{len(materials.multiple_choice_questions)} quiz question(s)"
        )
        return self._state

    def select_tool(self, tool: Union[StudyTool, str]) -> bool:
        """
        Choose which section of the materials to display.

        Returns:
            True if the selection was applied, False when no materials are shown

        Raises:
            ValueError: If tool is not a known StudyTool label
        """
        tool = StudyTool(tool)
        if not isinstance(self._state, Success):
            logger.debug(f"Ignoring tool selection {tool.value!r} in state {self._state.status}")
            return False
        self._selected_tool = tool
        return True

    def reset(self) -> None:
        """Return to Idle, abandoning any in-flight request."""
        self._sequence += 1
        self._state = Idle()
        self._selected_tool = None
        self._subject = None
        self._topic = None
        self._config_error = None if self.has_credential else MISSING_KEY_BANNER
