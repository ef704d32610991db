"""Stockroom - user authentication and product catalog backend.

Layers:
- domain: aggregates, repository interfaces, exceptions
- application: services orchestrating the domain
- infrastructure: SQLAlchemy persistence
- presentation: FastAPI app and Typer CLI
"""

__version__ = "1.0.0"
