"""A console casino with four games played for gonzos: players, games, casino rules and a menu."""

__version__ = "0.1.0"
__all__ = ["player", "games", "casino", "view"]