"""
Session memory for the dialogue controller.
"""
from .session_state import ADD_PENDING, SessionState

__all__ = [
    "ADD_PENDING",
    "SessionState",
]
