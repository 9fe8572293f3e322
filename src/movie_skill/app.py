"""
Public application facade for the movie voice skill.

This is the single stable entry point for the library: it wires the
movie server client into the dialogue controller.
"""
import logging
from typing import Dict, Optional
from .client import MovieServiceClient
from .config import SkillConfig
from .controller import DialogueController, TurnResult
from .exceptions import SkillNotInitializedError
from .memory import SessionState

logger = logging.getLogger(__name__)


class MovieSkillApp:
    """
    Public application facade for the movie voice skill.

    Usage:
        config = load_config_from_env()
        skill = MovieSkillApp(config)
        skill.initialize()
        result = skill.handle("CouchPotatoFind", {"movie": "Rogue One"}, SessionState())
    """

    def __init__(self, config: SkillConfig, client: Optional[MovieServiceClient] = None):
        """
        :param config: SkillConfig instance
        :param client: Optional movie server client (created from config when omitted)
        """
        self._config = config
        self._client = client
        self._controller: Optional[DialogueController] = None

    def initialize(self) -> None:
        """Create the client and controller. Safe to call more than once."""
        if self._controller:
            return

        if self._client is None:
            self._client = MovieServiceClient.from_config(self._config)

        self._controller = DialogueController(
            self._client,
            turn_timeout=self._config.request_timeout,
            max_workers=self._config.max_workers,
        )
        logger.info(f"Movie skill initialized for {self._config.base_url}")

    def handle(self, intent_name: Optional[str], slots: Optional[Dict[str, Optional[str]]],
               state: SessionState) -> TurnResult:
        """
        Handle one voice turn.

        :raises: SkillNotInitializedError if initialize() has not been called
        :raises: ServiceError if the movie server fails
        """
        if not self._controller:
            raise SkillNotInitializedError("Skill not initialized. Call initialize() first.")

        return self._controller.handle(intent_name, slots, state)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
