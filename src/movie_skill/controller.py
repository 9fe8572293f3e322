"""
Dialogue Controller - turns spoken intents into movie server calls.

One call to ``handle`` is one voice turn. The controller:
- Routes the intent against the current continuation state
- Makes the movie server calls the turn needs (waiting for all of them)
- Returns the spoken reply and the session state for the next turn

Movie server failures are not caught here; the platform layer converts
them into a generic spoken error.
"""
import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from typing import Dict, List, Optional

from .alternatives import alternatives
from .client import MovieServiceClient
from .exceptions import ServiceTimeoutError
from .interaction import IntentRouter, IntentType
from .memory import SessionState
from .models import CandidateMovie, Movie, SkillResponse

logger = logging.getLogger(__name__)

MOVIE_SLOT = "movie"
MAX_SPOKEN_MOVIES = 5


@dataclass
class TurnResult:
    response: SkillResponse
    state: SessionState


class DialogueController:
    """
    State machine for the find / add / confirm dialogue.

    States:
    - Idle: no continuation; accepts find and add
    - Awaiting confirmation: a candidate is on offer; accepts yes, no and stop
    """

    def __init__(self, client: MovieServiceClient, turn_timeout: float = 10.0,
                 max_workers: int = 4, router: Optional[IntentRouter] = None):
        """
        :param client: Movie server client
        :param turn_timeout: Seconds to wait for concurrent lookups before failing the turn
        :param max_workers: Upper bound on concurrent lookups per turn
        :param router: Intent router (defaults to IntentRouter())
        """
        self._client = client
        self._turn_timeout = turn_timeout
        self._max_workers = max_workers
        self._router = router or IntentRouter()

    def handle(self, intent_name: Optional[str], slots: Optional[Dict[str, Optional[str]]],
               state: SessionState) -> TurnResult:
        """
        Handle one voice turn.

        :param intent_name: Platform intent name
        :param slots: Slot values by name (values may be None)
        :param state: Session state from the previous turn (not modified)
        :return: TurnResult with the spoken response and the next session state
        :raises: ServiceError if a movie server call fails or times out
        """
        intent = self._router.route(intent_name)
        title = self._slot(slots, MOVIE_SLOT)
        logger.info(f"Turn: intent={intent.name}, continuation={state.continuation}, title={title!r}")

        if state.is_idle():
            if intent is IntentType.FIND:
                return TurnResult(self._find(title), state)
            if intent is IntentType.ADD:
                return self._add(title, state)
        elif state.is_awaiting_confirmation():
            if intent is IntentType.YES:
                return self._confirm(state.movie)
            if intent is IntentType.NO:
                return self._reject(state)
            if intent is IntentType.STOP:
                return TurnResult(SkillResponse.tell("OK, stopped"), SessionState.idle())

        return self._not_understood(intent_name, state)

    # ----------------------------
    # Idle: list-query flow
    # ----------------------------
    def _find(self, title: Optional[str]) -> SkillResponse:
        searches: List[Optional[str]] = alternatives(title) if title else [None]
        movies = self._list_all(searches)
        logger.info(f"Found {len(movies)} movies across {len(searches)} searches")

        if not movies:
            if title:
                return SkillResponse.tell(f"{title} is not currently added")
            return SkillResponse.tell("No movies are currently added")

        if len(movies) == 1:
            return SkillResponse.tell(movies[0].to_spoken())

        if len(movies) <= MAX_SPOKEN_MOVIES:
            return SkillResponse.tell("I found the following movies: " + self._join(movies))

        return SkillResponse.tell(
            f"I found {len(movies)} movies. The first five found were: "
            + self._join(movies[:MAX_SPOKEN_MOVIES])
        )

    def _list_all(self, searches: List[Optional[str]]) -> List[Movie]:
        """
        Run one list query per search concurrently and concatenate the results.

        Results keep search order. Any failure fails the whole turn, as does
        exceeding the turn timeout, even for a single search.
        """
        executor = ThreadPoolExecutor(max_workers=min(self._max_workers, len(searches)))
        try:
            futures = [executor.submit(self._client.list_movies, search) for search in searches]
            _, pending = wait(futures, timeout=self._turn_timeout)
            if pending:
                raise ServiceTimeoutError(
                    f"{len(pending)} of {len(futures)} movie lookups did not finish "
                    f"within {self._turn_timeout}s"
                )
            return [movie for future in futures for movie in future.result()]
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    # ----------------------------
    # Idle: search / offer flow
    # ----------------------------
    def _add(self, title: Optional[str], state: SessionState) -> TurnResult:
        if not title:
            return TurnResult(SkillResponse.tell("Please specify a movie name"), state)

        candidates = self._client.search_providers(title)
        if not candidates:
            return TurnResult(SkillResponse.tell(f"No movies found named {title}"), state)

        first, *rest = candidates
        return self._offer(SessionState.offering(first, rest, title))

    def _offer(self, state: SessionState) -> TurnResult:
        movie = state.movie
        year_text = f" from {movie.year}" if movie.year is not None else ""
        logger.info(f"Offering {movie.display_title!r}, {len(state.remaining)} more candidates")
        return TurnResult(
            SkillResponse.ask(
                f"Did you mean {movie.display_title}{year_text}? "
                f"You can answer 'Yes', 'No', or 'Stop'."
            ),
            state,
        )

    # ----------------------------
    # Awaiting confirmation
    # ----------------------------
    def _confirm(self, movie: CandidateMovie) -> TurnResult:
        added = bool(movie.external_id) and self._client.add_movie(movie.external_id)
        if added:
            speech = f"{movie.display_title} successfully added"
        else:
            speech = f"{movie.display_title} could not be added"
        logger.info(f"Add {movie.display_title!r} ({movie.external_id}): added={added}")
        return TurnResult(SkillResponse.tell(speech), SessionState.idle())

    def _reject(self, state: SessionState) -> TurnResult:
        next_state = state.next_offer()
        if next_state is None:
            return TurnResult(
                SkillResponse.tell(f"No more movies found named {state.name}"),
                SessionState.idle(),
            )
        return self._offer(next_state)

    # ----------------------------
    # Helpers
    # ----------------------------
    def _not_understood(self, intent_name: Optional[str], state: SessionState) -> TurnResult:
        speech = f"Sorry, I didn't understand the intent {intent_name}"
        # Keep a pending question answerable
        if state.is_awaiting_confirmation():
            return TurnResult(SkillResponse.ask(speech), state)
        return TurnResult(SkillResponse.tell(speech), state)

    @staticmethod
    def _slot(slots: Optional[Dict[str, Optional[str]]], name: str) -> Optional[str]:
        value = (slots or {}).get(name)
        if value is None or not value.strip():
            return None
        return value.strip()

    @staticmethod
    def _join(movies: List[Movie]) -> str:
        return ", ".join(movie.to_spoken() for movie in movies)
