"""
Export du catalogue en tables CSV relationnelles.

Quatre fichiers sont produits, chacun avec sa ligne d'en-tete :
- movies.csv    : movieId, title, avgVote, releaseYear, tagline, genres
- people.csv    : personId, name, birthYear, deathYear
- actors.csv    : personId, movieId, characters
- directors.csv : personId, movieId

Les listes (genres, personnages) sont jointes par ":".
"""

import csv
from pathlib import Path
from typing import Optional

from loguru import logger

from cineasts.core.entities.film import Movie, Person
from cineasts.core.ports.exporters import IMovieExporter
from cineasts.services.resolvers import PersonResolver, release_year
from cineasts.utils.constants import (
    ACTORS_CSV,
    CSV_HEADERS,
    CSV_LIST_SEPARATOR,
    DIRECTORS_CSV,
    MOVIES_CSV,
    PEOPLE_CSV,
)
from cineasts.utils.helpers import split_character_list


class PersonRegistry:
    """Ensemble des IDs de personnes deja ecrites, pour toute la duree d'un export."""

    def __init__(self) -> None:
        self._seen: set[int] = set()

    def add(self, person_id: int) -> bool:
        """Enregistre un ID ; retourne False s'il etait deja connu."""
        if person_id in self._seen:
            return False
        self._seen.add(person_id)
        return True

    def __contains__(self, person_id: int) -> bool:
        return person_id in self._seen

    def __len__(self) -> int:
        return len(self._seen)


class CsvExporter(IMovieExporter):
    """
    Exporteur CSV : une ligne par film, par personne et par credit.

    Les personnes sont dedupliquees sur tout l'export (une seule ligne dans
    people.csv), les lignes actors/directors ne le sont pas : une ligne par
    credit. Seules les personnes eligibles sont ecrites.

    Usage:
        with CsvExporter(Path("cache"), resolver) as exporter:
            exporter.write_header()
            exporter.export_movie(movie)
    """

    def __init__(self, output_dir: Path, person_resolver: PersonResolver) -> None:
        """
        Args:
            output_dir: Repertoire des quatre fichiers (cree si inexistant)
            person_resolver: Resolver des personnes du casting et de l'equipe
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        self._person_resolver = person_resolver
        self.registry = PersonRegistry()
        self._files = {
            name: open(output_dir / name, "w", newline="", encoding="utf-8")
            for name in CSV_HEADERS
        }
        self._writers = {name: csv.writer(f) for name, f in self._files.items()}

    def write_header(self) -> None:
        """Ecrit la ligne d'en-tete de chaque fichier."""
        for name, header in CSV_HEADERS.items():
            self._writers[name].writerow(header)

    def export_movie(self, movie: Movie) -> bool:
        """
        Ecrit les lignes d'un film dans les quatre tables.

        Returns:
            True si le film a ete ecrit, False s'il est exclu
        """
        if not movie.is_exportable:
            logger.debug("Film exclu de l'export CSV", movie_id=movie.id)
            return False

        people: dict[int, Optional[Person]] = {}

        def lookup(person_id: int) -> Optional[Person]:
            if person_id not in people:
                people[person_id] = self._person_resolver.resolve(person_id)
            return people[person_id]

        self._writers[MOVIES_CSV].writerow([
            movie.id,
            movie.title,
            f"{movie.vote_average:f}",
            release_year(movie),
            movie.tagline,
            CSV_LIST_SEPARATOR.join(movie.genres),
        ])

        for entry in movie.cast:
            person = lookup(entry.person_id)
            if person is None or not person.is_eligible:
                continue
            self._write_person(person)
            self._writers[ACTORS_CSV].writerow([
                person.id,
                movie.id,
                CSV_LIST_SEPARATOR.join(split_character_list(entry.character)),
            ])

        for entry in movie.directors:
            person = lookup(entry.person_id)
            if person is None or not person.is_eligible:
                continue
            self._write_person(person)
            self._writers[DIRECTORS_CSV].writerow([person.id, movie.id])

        return True

    def close(self) -> None:
        for f in self._files.values():
            f.close()

    def __enter__(self) -> "CsvExporter":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _write_person(self, person: Person) -> None:
        if self.registry.add(person.id):
            self._writers[PEOPLE_CSV].writerow([
                person.id,
                person.name,
                person.birth_year,
                person.death_year,
            ])
