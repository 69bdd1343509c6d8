"""
Couche domaine (core).

Contient les entités du catalogue et les ports (interfaces abstraites).
Cette couche n'a AUCUNE dépendance vers l'infrastructure (HTTP, cache disque, CLI).

Sous-packages :
- entities/ : Entités du catalogue (Movie, Person, CastEntry, CrewEntry, DiscoverPage)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
"""
