"""Standard playing cards, decks with cuts and riffle shuffles, and a terminal game of War."""

__version__ = "0.1.0"
__all__ = ["cards", "deck", "util", "war"]