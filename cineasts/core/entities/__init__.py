"""
Business entities representing the exported catalog.

Exports:
- Movie: Movie metadata with embedded credits
- Person: Actor or director metadata
- CastEntry / CrewEntry: Credits binding a person to a movie
- DiscoverPage: One page of the discover listing
"""

from cineasts.core.entities.film import CastEntry, CrewEntry, DiscoverPage, Movie, Person

__all__ = [
    "CastEntry",
    "CrewEntry",
    "DiscoverPage",
    "Movie",
    "Person",
]
