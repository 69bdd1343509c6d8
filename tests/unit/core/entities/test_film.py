"""
Tests for catalog entities.

Verifies exportability of movies, eligibility of people and year parsing.
"""

import pytest

from cineasts.core.entities.film import CastEntry, CrewEntry, Movie, Person
from tests.fixtures.catalog import make_movie


class TestMovie:
    """Tests for Movie properties."""

    def test_movie_with_date_and_credits_is_exportable(self):
        assert make_movie(1).is_exportable

    def test_short_release_date_is_not_exportable(self):
        """A release date of 2 characters excludes the movie."""
        assert not make_movie(1, release_date="19").is_exportable

    def test_empty_cast_is_not_exportable(self):
        movie = make_movie(1, cast=())
        assert not movie.has_credits
        assert not movie.is_exportable

    def test_empty_crew_is_not_exportable(self):
        movie = make_movie(1, crew=())
        assert not movie.has_credits
        assert not movie.is_exportable

    def test_directors_keeps_only_director_job_in_order(self):
        movie = make_movie(
            1,
            crew=(
                CrewEntry(1, "A", "Director"),
                CrewEntry(2, "B", "Screenplay"),
                CrewEntry(3, "C", "Director"),
            ),
        )
        assert [entry.person_id for entry in movie.directors] == [1, 3]

    def test_movie_is_immutable(self):
        movie = Movie(id=1, title="Fight Club")
        with pytest.raises(AttributeError):
            movie.title = "Other"


class TestPerson:
    """Tests for Person properties."""

    def test_years_from_dates(self):
        person = Person(id=3084, name="Marlon Brando", birthday="1924-04-03", deathday="2004-07-01")
        assert person.birth_year == 1924
        assert person.death_year == 2004

    def test_unknown_years_are_zero(self):
        person = Person(id=1, name="Someone")
        assert person.birth_year == 0
        assert person.death_year == 0

    def test_eligible_person(self):
        assert Person(id=287, name="Brad Pitt", birthday="1963-12-18").is_eligible

    def test_empty_birthday_is_not_eligible(self):
        assert not Person(id=1, name="Unknown Extra", birthday="").is_eligible

    def test_short_birthday_is_not_eligible(self):
        assert not Person(id=1, name="Unknown Extra", birthday="196").is_eligible

    def test_year_only_birthday_is_eligible(self):
        assert Person(id=1, name="Someone", birthday="1963").is_eligible

    def test_empty_name_is_not_eligible(self):
        assert not Person(id=1, name="", birthday="1963-12-18").is_eligible

    def test_name_without_letters_is_not_eligible(self):
        assert not Person(id=1, name="周星驰", birthday="1962-06-22").is_eligible


class TestCredits:
    """Tests for CastEntry / CrewEntry."""

    def test_crew_director_flag(self):
        assert CrewEntry(1, "David Fincher", "Director").is_director
        assert not CrewEntry(2, "Jim Uhls", "Screenplay").is_director

    def test_cast_entry_defaults(self):
        entry = CastEntry(1)
        assert entry.character == ""
