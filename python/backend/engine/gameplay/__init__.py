from backend.engine.gameplay.game import GameSession, SessionEvent

__all__ = ["GameSession", "SessionEvent"]
