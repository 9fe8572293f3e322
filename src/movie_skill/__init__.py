"""
Voice skill for managing a movie download server.
"""
from .alternatives import alternatives
from .app import MovieSkillApp
from .client import MovieServiceClient
from .config import SkillConfig
from .controller import DialogueController, TurnResult
from .exceptions import MovieSkillError, ServiceError
from .memory import SessionState
from .models import CandidateMovie, Movie, SkillResponse

__all__ = [
    "alternatives",
    "MovieSkillApp",
    "MovieServiceClient",
    "SkillConfig",
    "DialogueController",
    "TurnResult",
    "MovieSkillError",
    "ServiceError",
    "SessionState",
    "CandidateMovie",
    "Movie",
    "SkillResponse",
]
