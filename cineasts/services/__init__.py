"""
Couche application : resolution, pagination et export du catalogue.

- resolvers : PersonResolver, MovieResolver, release_year
- catalog : CatalogPaginator (listing discover page par page)
- cypher_exporter : CypherExporter (script de chargement Neo4j)
- csv_exporter : CsvExporter (quatre tables CSV)
- export : ExportService (orchestration et statistiques)
"""
