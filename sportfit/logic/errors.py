"""
Engine Errors

Typed errors raised by the sport-fit engine. The engine never retries or
recovers locally; callers decide how to surface these.
"""

from typing import Optional


class InvalidInputError(ValueError):
    """A test result batch that cannot be scored."""

    def __init__(self, message: str, metric_name: Optional[str] = None):
        super().__init__(message)
        self.metric_name = metric_name


class CatalogueError(ValueError):
    """Sport catalogue data could not be loaded or validated."""


class UnknownSportError(KeyError):
    """Requested sport id is not in the catalogue."""

    def __init__(self, sport_id: str):
        super().__init__(sport_id)
        self.sport_id = sport_id

    def __str__(self) -> str:
        return f"Unknown sport: {self.sport_id}"
