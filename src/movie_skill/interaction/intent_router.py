"""
Deterministic intent router.

Maps the intent names sent by the voice platform onto IntentType values.
"""
import logging
from typing import Dict, Optional
from .intent_types import IntentType

logger = logging.getLogger(__name__)


class IntentRouter:
    """
    Deterministic intent router.

    Recognises both the skill's interaction-model names (``CouchPotatoFind``,
    ``AMAZON.YesIntent``...) and the short names used in tests and demos.
    Anything else is UNKNOWN.
    """

    INTENT_NAMES: Dict[str, IntentType] = {
        "CouchPotatoFind": IntentType.FIND,
        "CouchPotatoAdd": IntentType.ADD,
        "AMAZON.YesIntent": IntentType.YES,
        "AMAZON.NoIntent": IntentType.NO,
        "AMAZON.StopIntent": IntentType.STOP,
        "AMAZON.CancelIntent": IntentType.STOP,
        "find": IntentType.FIND,
        "add": IntentType.ADD,
        "yes": IntentType.YES,
        "no": IntentType.NO,
        "stop": IntentType.STOP,
    }

    def route(self, intent_name: Optional[str]) -> IntentType:
        """
        Route a platform intent name to an intent type.

        :param intent_name: Intent name from the platform request
        :return: IntentType enum value
        """
        if not intent_name:
            return IntentType.UNKNOWN

        intent = self.INTENT_NAMES.get(intent_name.strip(), IntentType.UNKNOWN)
        if intent is IntentType.UNKNOWN:
            logger.warning(f"Unrecognised intent name: {intent_name!r}")
        return intent
