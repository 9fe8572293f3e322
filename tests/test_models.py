import pytest
from movie_skill.models import CandidateMovie, Movie, SkillResponse


@pytest.mark.parametrize("status,spoken", [
    ("active", "queued"),
    ("done", "downloaded"),
    ("snatched", "snatched"),
])
def test_movie_spoken_status(status, spoken):
    """Test status words spoken for a movie."""
    movie = Movie(title="Inception", status=status)

    assert movie.spoken_status == spoken
    assert movie.to_spoken() == f"Inception is {spoken}"
    # Raw status is preserved
    assert movie.status == status


def test_candidate_display_title_is_first_title():
    """Test the canonical title is the first one."""
    candidate = CandidateMovie(titles=["Rogue One", "Rogue One: A Star Wars Story"],
                               external_id="tt3748528", year=2016)

    assert candidate.display_title == "Rogue One"


def test_candidate_dict_round_trip():
    """Test candidate serialisation."""
    candidate = CandidateMovie(titles=["Arrival"], external_id=None, year=None)

    data = candidate.to_dict()

    assert data == {"imdb": None, "titles": ["Arrival"], "year": None}
    assert CandidateMovie.from_dict(data) == candidate


def test_skill_response_tell_and_ask():
    """Test tell ends the session and ask keeps it open."""
    assert SkillResponse.tell("bye").end_session is True
    assert SkillResponse.ask("Did you mean it?").end_session is False
