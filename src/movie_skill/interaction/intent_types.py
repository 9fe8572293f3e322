"""
Intent types understood by the movie skill.
"""
from enum import Enum, auto


class IntentType(Enum):
    """Types of spoken intents."""
    FIND = auto()
    ADD = auto()
    YES = auto()
    NO = auto()
    STOP = auto()
    UNKNOWN = auto()
