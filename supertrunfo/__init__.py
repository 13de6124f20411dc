"""City trumps card game: city cards, a single-attribute round and a two-attribute match."""

__version__ = "0.1.0"
__all__ = ["cards", "adventurer", "expert"]