"""Game module: play sessions driven by a UI."""

from .session import GameSession, GameStatus, SessionView, create_session, format_time

__all__ = ["GameSession", "GameStatus", "SessionView", "create_session", "format_time"]
