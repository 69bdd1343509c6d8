"""
Fonctions utilitaires partagees dans le projet Cineasts.

Ce module centralise les transformations de chaines utilisees par les exporteurs :
- sanitize_identifier / sanitize_label : noms de variables et labels Cypher
- quote_literal : litteral chaine entre guillemets, echappe
- split_character_list : decoupage du champ "character" d'un casting
- year_from_date : annee depuis une date texte (YYYY-MM-DD)
"""

import re
from typing import Optional

from cineasts.utils.constants import CHARACTER_SEPARATORS

_NON_ALPHA = re.compile(r"[^A-Za-z]")
_CHARACTER_SPLIT = re.compile("|".join(re.escape(sep) for sep in CHARACTER_SEPARATORS))


def sanitize_identifier(text: str) -> str:
    """
    Remplace chaque caractere hors [A-Za-z] par un underscore.

    La casse est conservee : "O'Brien-Smith" -> "O_Brien_Smith".
    Deux noms qui ne different que par leurs caracteres non alphabetiques
    donnent le meme resultat.
    """
    return _NON_ALPHA.sub("_", text)


def sanitize_label(text: str) -> str:
    """Supprime les caracteres hors [A-Za-z] (ex: "Science Fiction" -> "ScienceFiction")."""
    return _NON_ALPHA.sub("", text)


def quote_literal(text: str) -> str:
    """
    Entoure une chaine de guillemets doubles en echappant son contenu.

    Les antislashs sont echappes AVANT les guillemets, sinon l'antislash
    ajoute devant un guillemet serait lui-meme double.
    """
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def split_character_list(raw: str) -> list[str]:
    """
    Decoupe un champ de personnages sur "/" et "\\".

    Exemple : "Big Momma / Malcolm Turner" -> ["Big Momma", "Malcolm Turner"]
    L'ordre est conserve, les espaces autour de chaque nom sont retires.
    """
    return [part.strip() for part in _CHARACTER_SPLIT.split(raw or "")]


def year_from_date(value: Optional[str]) -> int:
    """
    Extrait l'annee des 4 premiers caracteres d'une date.

    Retourne 0 (annee inconnue) si la valeur est absente, trop courte
    ou ne commence pas par 4 chiffres. Ne leve jamais d'exception.
    """
    if not value or len(value) < 4:
        return 0
    head = value[:4]
    if not (head.isascii() and head.isdigit()):
        return 0
    return int(head)
