"""
Export du catalogue en script Cypher de chargement (Neo4j).

Chaque film produit un bloc d'instructions MERGE/SET termine par
"RETURN movie.title;". Les noeuds sont crees ou retrouves par leur ID
TMDB, les relations par MERGE : rejouer le script est idempotent.

Exemple de bloc :
    MERGE (movie:Movie {id:550})
    ON CREATE SET movie.title = "Fight Club"
        , movie.release = 1999
        , movie:Drama
      MERGE (Brad_Pitt_287:Person {id:287})
      ON CREATE SET Brad_Pitt_287.name = "Brad Pitt"
        , Brad_Pitt_287.born = 1963
      SET Brad_Pitt_287:Actor
      MERGE (Brad_Pitt_287)-[Brad_Pitt_287_act:ACTS_IN]->(movie)
      SET Brad_Pitt_287_act.roles = ["Tyler Durden"]
    RETURN movie.title;
"""

from typing import Optional, TextIO

from loguru import logger

from cineasts.core.entities.film import Movie, Person
from cineasts.core.ports.exporters import IMovieExporter
from cineasts.services.resolvers import PersonResolver, release_year
from cineasts.utils.constants import CYPHER_INDEX_STATEMENTS, CYPHER_MOVIE_TERMINATOR
from cineasts.utils.helpers import (
    quote_literal,
    sanitize_identifier,
    sanitize_label,
    split_character_list,
)


def person_variable(person: Person) -> str:
    """
    Nom de variable Cypher d'une personne.

    Le nom assaini est suffixe par l'ID TMDB : deux homonymes (ou deux noms
    qui ne different que par la ponctuation) ne partagent pas de variable.
    """
    return f"{sanitize_identifier(person.name).strip('_')}_{person.id}"


def merge_roles(existing: list[str], new: list[str]) -> list[str]:
    """Union ordonnee de deux listes de roles, sans doublons ni roles vides."""
    merged = list(existing)
    for role in new:
        if role and role not in merged:
            merged.append(role)
    return merged


def _roles_literal(roles: list[str]) -> str:
    return "[" + ",".join(quote_literal(role) for role in roles) + "]"


class _MovieScope:
    """Etat local a un film : personnes declarees, roles et realisateurs emis."""

    def __init__(self) -> None:
        self.declared: set[int] = set()
        self.roles: dict[int, list[str]] = {}
        self.directed: set[int] = set()
        self.people: dict[int, Optional[Person]] = {}


class CypherExporter(IMovieExporter):
    """
    Exporteur Cypher : un bloc d'instructions par film.

    La deduplication des personnes est locale a chaque film : une personne
    presente dans plusieurs films est re-declaree (MERGE) dans chacun.
    Le casting est toujours traite avant l'equipe technique, donc la
    relation ACTS_IN d'un acteur est liee avant toute reference.
    """

    def __init__(self, output: TextIO, person_resolver: PersonResolver) -> None:
        """
        Args:
            output: Flux texte de sortie (stdout ou fichier)
            person_resolver: Resolver des personnes du casting et de l'equipe
        """
        self._output = output
        self._person_resolver = person_resolver

    def write_header(self) -> None:
        """Emet les instructions de creation d'index."""
        for statement in CYPHER_INDEX_STATEMENTS:
            self._output.write(statement + "\n")

    def export_movie(self, movie: Movie) -> bool:
        """
        Emet le bloc Cypher d'un film.

        Args:
            movie: Film resolu avec ses credits

        Returns:
            True si le bloc a ete emis, False si le film est exclu
        """
        if not movie.is_exportable:
            logger.debug("Film exclu de l'export Cypher", movie_id=movie.id)
            return False

        scope = _MovieScope()
        lines = self._movie_lines(movie)

        for entry in movie.cast:
            person = self._lookup(scope, entry.person_id)
            if person is None or not person.is_eligible:
                continue
            var = person_variable(person)
            characters = split_character_list(entry.character)
            if person.id in scope.roles:
                scope.roles[person.id] = merge_roles(scope.roles[person.id], characters)
                lines.append(f"  SET {var}_act.roles = {_roles_literal(scope.roles[person.id])}")
                continue
            lines.extend(self._declare(scope, person))
            scope.roles[person.id] = merge_roles([], characters)
            lines.append(f"  SET {var}:Actor")
            lines.append(f"  MERGE ({var})-[{var}_act:ACTS_IN]->(movie)")
            lines.append(f"  SET {var}_act.roles = {_roles_literal(scope.roles[person.id])}")

        for entry in movie.directors:
            person = self._lookup(scope, entry.person_id)
            if person is None or not person.is_eligible or person.id in scope.directed:
                continue
            var = person_variable(person)
            lines.extend(self._declare(scope, person))
            lines.append(f"  SET {var}:Director")
            lines.append(f"  MERGE ({var})-[:DIRECTED]->(movie)")
            scope.directed.add(person.id)

        lines.append(CYPHER_MOVIE_TERMINATOR)
        self._output.write("\n".join(lines) + "\n")
        return True

    def close(self) -> None:
        self._output.flush()

    def _lookup(self, scope: _MovieScope, person_id: int) -> Optional[Person]:
        """Resout une personne une seule fois par film."""
        if person_id not in scope.people:
            scope.people[person_id] = self._person_resolver.resolve(person_id)
        return scope.people[person_id]

    @staticmethod
    def _movie_lines(movie: Movie) -> list[str]:
        lines = [
            f"MERGE (movie:Movie {{id:{movie.id}}})",
            f"ON CREATE SET movie.title = {quote_literal(movie.title)}",
            f"    , movie.release = {release_year(movie)}",
        ]
        if movie.vote_average > 0:
            lines.append(f"    , movie.voteAverage = {movie.vote_average:f}")
        if movie.tagline:
            lines.append(f"    , movie.tagline = {quote_literal(movie.tagline)}")
        labels: list[str] = []
        for genre in movie.genres:
            label = sanitize_label(genre)
            if label and label not in labels:
                labels.append(label)
        lines.extend(f"    , movie:{label}" for label in labels)
        return lines

    @staticmethod
    def _declare(scope: _MovieScope, person: Person) -> list[str]:
        """MERGE du noeud Person, une seule fois par film."""
        if person.id in scope.declared:
            return []
        scope.declared.add(person.id)
        var = person_variable(person)
        lines = [
            f"  MERGE ({var}:Person {{id:{person.id}}})",
            f"  ON CREATE SET {var}.name = {quote_literal(person.name)}",
        ]
        if person.birth_year > 0:
            lines.append(f"    , {var}.born = {person.birth_year}")
        if person.death_year > 0:
            lines.append(f"    , {var}.died = {person.death_year}")
        return lines
