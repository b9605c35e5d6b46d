"""Game management layer — the session a front end drives.

Quick start::

    from retrochess.game import GameSession
    from retrochess.core.types import E2, E4

    session = GameSession()
    session.play(E2, E4)
    print(session.position.status)
"""

from retrochess.game.config import SessionConfig
from retrochess.game.session import GameEvents, GamePhase, GameSession

__all__ = [
    "GameEvents",
    "GamePhase",
    "GameSession",
    "SessionConfig",
]
