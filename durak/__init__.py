"""The Durak card game: cards, deck, players, turn state machine, controller and console game."""

__version__ = "0.1.0"
__all__ = ["__version__"]