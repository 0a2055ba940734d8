"""Texas Hold'em cards, players, hand ranking, game state and a static file server."""

__version__ = "0.1.0"
__all__ = ["cards", "player", "hand", "game", "server"]