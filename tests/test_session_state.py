"""
Tests for session state and its platform attribute mapping.
"""
from movie_skill.memory import ADD_PENDING, SessionState
from movie_skill.models import CandidateMovie

FIRST = CandidateMovie(titles=["Rogue One"], external_id="tt3748528", year=2016)
SECOND = CandidateMovie(titles=["Rogue"], external_id=None, year=None)


def test_default_state_is_idle():
    """Test a new state is idle."""
    state = SessionState()

    assert state.is_idle()
    assert not state.is_awaiting_confirmation()
    assert state.to_attributes() == {}


def test_offering_state():
    """Test the pending-add state."""
    state = SessionState.offering(FIRST, [SECOND], "rogue one")

    assert state.continuation == ADD_PENDING
    assert state.is_awaiting_confirmation()
    assert FIRST not in state.remaining


def test_pending_without_movie_is_not_awaiting():
    """Test a pending marker without a movie is not a confirmation."""
    state = SessionState(continuation=ADD_PENDING)

    assert not state.is_idle()
    assert not state.is_awaiting_confirmation()


def test_next_offer_pops_head():
    """Test advancing to the next candidate."""
    state = SessionState.offering(FIRST, [SECOND], "rogue one")

    next_state = state.next_offer()

    assert next_state.movie == SECOND
    assert next_state.remaining == []
    assert next_state.name == "rogue one"
    # original untouched
    assert state.movie == FIRST
    assert state.remaining == [SECOND]


def test_next_offer_exhausted():
    """Test advancing past the last candidate."""
    assert SessionState.offering(FIRST, [], "x").next_offer() is None


def test_attributes_round_trip():
    """Test conversion to and from platform attributes."""
    state = SessionState.offering(FIRST, [SECOND], "rogue one")

    attributes = state.to_attributes()

    assert attributes == {
        "continuation": ADD_PENDING,
        "movie": {"imdb": "tt3748528", "titles": ["Rogue One"], "year": 2016},
        "remaining": [{"imdb": None, "titles": ["Rogue"], "year": None}],
        "name": "rogue one",
    }
    assert SessionState.from_attributes(attributes) == state


def test_from_missing_attributes_is_idle():
    """Test missing attributes mean idle."""
    assert SessionState.from_attributes(None).is_idle()
    assert SessionState.from_attributes({}).is_idle()
