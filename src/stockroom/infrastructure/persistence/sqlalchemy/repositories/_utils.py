"""Shared utilities for SQLAlchemy repositories."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(error: IntegrityError) -> bool:
    """Tell unique-index violations apart from other integrity errors.

    Matches the SQLite and PostgreSQL (asyncpg) messages.
    """
    text = str(error.orig if error.orig is not None else error).lower()
    return "unique" in text or "duplicate key" in text
