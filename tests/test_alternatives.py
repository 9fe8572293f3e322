"""
Tests for title spelling alternatives.
"""
import pytest
from movie_skill.alternatives import alternatives, spell_digits, expand_honorifics


class TestAlternatives:
    """Tests for alternatives()."""

    @pytest.mark.parametrize("name", ["Rogue One", "Arrival", "", "Drive", "Dr No"])
    def test_plain_title_has_single_alternative(self, name):
        """Test a title with nothing to substitute."""
        assert alternatives(name) == [name]

    def test_digits_only(self):
        """Test digit spelling."""
        assert alternatives("Rogue 1") == ["Rogue 1", "Rogue one"]

    def test_all_digits_replaced_at_once(self):
        """Test every digit is spelled in one variant."""
        assert alternatives("2001") == ["2001", "twozerozeroone"]
        assert alternatives("Ocean's 11") == ["Ocean's 11", "Ocean's oneone"]

    def test_honorific_only(self):
        """Test honorific expansion."""
        assert alternatives("Dr. Strange") == ["Dr. Strange", "Doctor Strange"]

    def test_every_honorific_replaced(self):
        """Test every honorific is expanded in one variant."""
        assert alternatives("Dr. Jekyll and Dr. Hyde") == [
            "Dr. Jekyll and Dr. Hyde",
            "Doctor Jekyll and Doctor Hyde",
        ]

    def test_digits_and_honorific_cartesian_product(self):
        """Test both rules combine into four variants."""
        result = alternatives("Dr. Dolittle 2")

        assert len(result) == 4
        # digit variant outer, honorific variant inner
        assert result == [
            "Dr. Dolittle 2",
            "Doctor Dolittle 2",
            "Dr. Dolittle two",
            "Doctor Dolittle two",
        ]

    def test_original_always_first(self):
        """Test the spoken title leads the list."""
        for name in ["Se7en", "Dr. Who", "Up"]:
            assert alternatives(name)[0] == name


def test_spell_digits_leaves_other_characters():
    """Test only digits change."""
    assert spell_digits("K-9 & 0") == "K-nine & zero"


def test_expand_honorifics_is_literal():
    """Test Dr without a dot is left alone."""
    # "Dr" followed by any other character is not an honorific
    assert expand_honorifics("Dracula Drive") == "Dracula Drive"
