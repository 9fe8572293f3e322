"""
Interaction layer for intent routing.

Sits between the voice platform webhook and the dialogue controller,
turning platform intent names into IntentType values.
"""
from .intent_types import IntentType
from .intent_router import IntentRouter

__all__ = ["IntentType", "IntentRouter"]
