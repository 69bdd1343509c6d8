"""
Interface ligne de commande (Typer + Rich).

Les commandes sont montees sur l'application dans cineasts/main.py.
"""
