from dataclasses import dataclass
from typing import Any, Dict, List, Optional


SPOKEN_STATUSES = {
    "active": "queued",
    "done": "downloaded",
}


@dataclass
class Movie:
    title: str
    status: str

    @property
    def spoken_status(self) -> str:
        return SPOKEN_STATUSES.get(self.status, self.status)

    def to_spoken(self) -> str:
        return f"{self.title} is {self.spoken_status}"


@dataclass
class CandidateMovie:
    """A provider match offered to the user for confirmation."""
    titles: List[str]
    external_id: Optional[str] = None
    year: Optional[int] = None

    @property
    def display_title(self) -> str:
        return self.titles[0]

    def to_dict(self) -> Dict[str, Any]:
        return {"imdb": self.external_id, "titles": list(self.titles), "year": self.year}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CandidateMovie":
        return cls(
            titles=list(data["titles"]),
            external_id=data.get("imdb"),
            year=data.get("year"),
        )


@dataclass
class SkillResponse:
    speech: str
    end_session: bool = True

    @classmethod
    def tell(cls, speech: str) -> "SkillResponse":
        """Terminal response: the dialogue ends after it is spoken."""
        return cls(speech=speech, end_session=True)

    @classmethod
    def ask(cls, speech: str) -> "SkillResponse":
        """Question: the session stays open for the next intent."""
        return cls(speech=speech, end_session=False)
