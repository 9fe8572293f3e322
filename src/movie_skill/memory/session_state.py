"""
Session state for multi-turn dialogues.

The voice platform owns the session and round-trips a JSON attribute
mapping with every request. SessionState is the typed view of that
mapping; the controller receives one and returns a new one each turn.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from ..models import CandidateMovie

ADD_PENDING = "add-pending"


@dataclass(frozen=True)
class SessionState:
    """
    Typed session state.

    Invariant: when continuation is ADD_PENDING, ``movie`` holds the
    candidate currently offered and ``remaining`` holds the candidates not
    yet offered (never including ``movie``).
    """
    continuation: Optional[str] = None
    movie: Optional[CandidateMovie] = None
    remaining: List[CandidateMovie] = field(default_factory=list)
    name: Optional[str] = None

    @classmethod
    def idle(cls) -> "SessionState":
        return cls()

    @classmethod
    def offering(cls, movie: CandidateMovie, remaining: List[CandidateMovie],
                 name: str) -> "SessionState":
        """State for a pending add: ``movie`` is on offer, ``remaining`` queued behind it."""
        return cls(continuation=ADD_PENDING, movie=movie, remaining=list(remaining), name=name)

    def is_idle(self) -> bool:
        return self.continuation is None

    def is_awaiting_confirmation(self) -> bool:
        return self.continuation == ADD_PENDING and self.movie is not None

    def next_offer(self) -> Optional["SessionState"]:
        """
        Advance the disambiguation loop by one candidate.

        :return: State offering the next remaining candidate, or None when exhausted
        """
        if not self.remaining:
            return None
        head, *tail = self.remaining
        return replace(self, movie=head, remaining=tail)

    def to_attributes(self) -> Dict[str, Any]:
        """Serialise to the platform's JSON attribute store."""
        if self.is_idle():
            return {}
        return {
            "continuation": self.continuation,
            "movie": self.movie.to_dict() if self.movie else None,
            "remaining": [candidate.to_dict() for candidate in self.remaining],
            "name": self.name,
        }

    @classmethod
    def from_attributes(cls, attributes: Optional[Dict[str, Any]]) -> "SessionState":
        """Build from the platform's JSON attribute store (missing keys mean idle)."""
        attributes = attributes or {}
        movie = attributes.get("movie")
        return cls(
            continuation=attributes.get("continuation"),
            movie=CandidateMovie.from_dict(movie) if movie else None,
            remaining=[CandidateMovie.from_dict(c) for c in attributes.get("remaining") or []],
            name=attributes.get("name"),
        )
