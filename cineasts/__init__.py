"""
Cineasts - Export du catalogue de films TMDB.

Ce package parcourt le listing discover de TMDB, enrichit chaque film de son
casting et de ses réalisateurs, et produit un script Cypher de chargement
Neo4j ou quatre tables CSV relationnelles.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports)
- services/ : Couche application (résolution, pagination, export)
- adapters/ : Couche infrastructure (CLI, client API, cache disque)
"""

__version__ = "0.1.0"
