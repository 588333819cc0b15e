"""Pong - Game Info for launchers.

Exposes a factory so launchers can build the game without importing
the game mode module up front.
"""


def get_game_mode(**kwargs):
    """Factory function to create a Pong game instance.

    Args:
        **kwargs: Game configuration options (from CLI)

    Returns:
        PongMode instance
    """
    from games.Pong.game_mode import PongMode
    return PongMode(**kwargs)
