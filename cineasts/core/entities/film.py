"""
Catalog entities.

Immutable snapshots of TMDB records (movies, people, credits, discover pages)
as decoded by the API client. They are never mutated after creation.
"""

from dataclasses import dataclass

from cineasts.utils.constants import DIRECTOR_JOB
from cineasts.utils.helpers import sanitize_identifier, year_from_date


@dataclass(frozen=True)
class CastEntry:
    """
    One acting credit of a movie.

    Attributes:
        person_id: TMDB person ID
        name: Name as credited on this movie
        character: Character name, or several names separated by "/" or "\\"
    """

    person_id: int
    name: str = ""
    character: str = ""


@dataclass(frozen=True)
class CrewEntry:
    """
    One crew credit of a movie.

    Attributes:
        person_id: TMDB person ID
        name: Name as credited on this movie
        job: Job title ("Director", "Screenplay", ...)
    """

    person_id: int
    name: str = ""
    job: str = ""

    @property
    def is_director(self) -> bool:
        return self.job == DIRECTOR_JOB


@dataclass(frozen=True)
class Movie:
    """
    Movie metadata from TMDB, with embedded credits.

    Attributes:
        id: TMDB movie ID
        title: Title
        tagline: Tagline ("" when absent)
        release_date: Release date as returned by the API (YYYY-MM-DD)
        genres: Genre names, in API order
        vote_average: Average vote (0.0 when absent)
        cast: Acting credits, in billing order
        crew: Crew credits
    """

    id: int
    title: str = ""
    tagline: str = ""
    release_date: str = ""
    genres: tuple[str, ...] = ()
    vote_average: float = 0.0
    cast: tuple[CastEntry, ...] = ()
    crew: tuple[CrewEntry, ...] = ()

    @property
    def has_credits(self) -> bool:
        """True when both cast and crew are non-empty."""
        return bool(self.cast) and bool(self.crew)

    @property
    def is_exportable(self) -> bool:
        """A movie is exported only with a 4+ character release date and full credits."""
        return len(self.release_date) >= 4 and self.has_credits

    @property
    def directors(self) -> tuple[CrewEntry, ...]:
        return tuple(entry for entry in self.crew if entry.is_director)


@dataclass(frozen=True)
class Person:
    """
    Person metadata from TMDB.

    The actor/director role is contextual (given by the credit), not a type.

    Attributes:
        id: TMDB person ID
        name: Name
        birthday: Birth date (YYYY-MM-DD, "" when unknown)
        deathday: Death date (YYYY-MM-DD, "" when unknown or alive)
    """

    id: int
    name: str = ""
    birthday: str = ""
    deathday: str = ""

    @property
    def birth_year(self) -> int:
        """Birth year, 0 when unknown."""
        return year_from_date(self.birthday)

    @property
    def death_year(self) -> int:
        """Death year, 0 when unknown."""
        return year_from_date(self.deathday)

    @property
    def is_eligible(self) -> bool:
        """
        Whether the person can be exported as an actor or a director.

        Requires a name, a birth date of at least 4 characters and at least
        one alphabetic character in the name.
        """
        return (
            bool(self.name)
            and len(self.birthday) >= 4
            and bool(sanitize_identifier(self.name).strip("_"))
        )


@dataclass(frozen=True)
class DiscoverPage:
    """
    One page of the TMDB discover listing.

    Attributes:
        page: Page number (1-indexed)
        movie_ids: IDs of the listed movies, in listing order
        total_pages: Total number of pages reported by the API
        total_results: Total number of movies reported by the API
    """

    page: int
    movie_ids: tuple[int, ...] = ()
    total_pages: int = 0
    total_results: int = 0
