"""
Per-browser-session controllers.

Gradio serves every visitor from one process; each session gets its own
RequestLifecycleController so one user's request never touches another's state.
"""
import logging
from typing import Callable, Dict, Optional

from study_assistant.core.controller import RequestLifecycleController

logger = logging.getLogger(__name__)

DEFAULT_SESSION = "default"


class SessionRegistry:
    """Maps Gradio session hashes to controllers, creating them on first use."""

    def __init__(self, factory: Callable[[], RequestLifecycleController]):
        self._factory = factory
        self._controllers: Dict[str, RequestLifecycleController] = {}

    @staticmethod
    def _key(session_hash: Optional[str]) -> str:
        return session_hash or DEFAULT_SESSION

    def get(self, session_hash: Optional[str]) -> RequestLifecycleController:
        key = self._key(session_hash)
        controller = self._controllers.get(key)
        if controller is None:
            controller = self._factory()
            self._controllers[key] = controller
            logger.debug(f"Created controller for session {key}")
        return controller

    def drop(self, session_hash: Optional[str]) -> None:
        """Forget a session; its in-flight request, if any, is abandoned."""
        controller = self._controllers.pop(self._key(session_hash), None)
        if controller is not None:
            controller.reset()
            logger.debug(f"Dropped controller for session {self._key(session_hash)}")

    def __len__(self) -> int:
        return len(self._controllers)

    def __contains__(self, session_hash: Optional[str]) -> bool:
        return self._key(session_hash) in self._controllers
