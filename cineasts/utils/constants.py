"""
Constantes globales pour l'export Cineasts.

Ce module contient les constantes utilisees dans l'application:
- URL de base de l'API TMDB et valeur sentinelle de la cle API
- Delai par defaut entre deux requetes et filtre de popularite
- En-tetes des tables CSV
- Instructions d'index emises en tete du script Cypher
"""

# URL de base de l'API TMDB v3
TMDB_BASE_URL = "http://api.themoviedb.org/3"

# Valeur laissee par defaut pour la cle API (= non renseignee)
API_KEY_PLACEHOLDER = ".."

# Delai entre deux requetes reseau (ms), pour rester sous le rate limit TMDB
DEFAULT_REQUEST_DELAY_MS = 350

# Nombre minimum de votes pour qu'un film apparaisse dans le listing discover
DEFAULT_MIN_VOTE_COUNT = 10

# Seul poste de l'equipe technique exporte
DIRECTOR_JOB = "Director"

# Separateurs des noms de personnages dans le champ "character"
CHARACTER_SEPARATORS = ("/", "\\")

# Separateur des listes dans les colonnes CSV (genres, personnages)
CSV_LIST_SEPARATOR = ":"

# Tables CSV : nom de fichier -> en-tete
MOVIES_CSV = "movies.csv"
PEOPLE_CSV = "people.csv"
ACTORS_CSV = "actors.csv"
DIRECTORS_CSV = "directors.csv"

CSV_HEADERS = {
    MOVIES_CSV: ("movieId", "title", "avgVote", "releaseYear", "tagline", "genres"),
    PEOPLE_CSV: ("personId", "name", "birthYear", "deathYear"),
    ACTORS_CSV: ("personId", "movieId", "characters"),
    DIRECTORS_CSV: ("personId", "movieId"),
}

# Index crees avant le chargement des films
CYPHER_INDEX_STATEMENTS = (
    "CREATE INDEX movie_title IF NOT EXISTS FOR (m:Movie) ON (m.title);",
    "CREATE INDEX person_name IF NOT EXISTS FOR (p:Person) ON (p.name);",
)

# Instruction terminant le bloc d'un film
CYPHER_MOVIE_TERMINATOR = "RETURN movie.title;"
