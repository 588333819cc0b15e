"""Common GameState enum for all Rally games.

All games must use this standard GameState enum so launchers can tell
whether a game is still in progress.

Games can have additional internal states, but must map them to these
standard states via the `state` property.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states used by the Rally platform.

    States:
        PLAYING: Active gameplay in progress (menus inside a game count too)
        PAUSED: Game temporarily paused (manual pause)
        GAME_OVER: Game ended in loss/failure
        WON: Game ended in success/victory

    For games with internal states:
        class MyGameMode:
            @property
            def state(self) -> GameState:
                # Map internal state to standard state
                if self._phase == "lost":
                    return GameState.GAME_OVER
                elif self._phase == "won":
                    return GameState.WON
                return GameState.PLAYING
    """
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"
