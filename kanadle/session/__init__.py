from kanadle.errors import DataUnavailable, InvalidWord, KanadleError, LoadError, SessionOver
from .state import Attempt, AttemptResult, AttemptStatus, PuzzleSession, RowView, SessionState
from .game import pick_answer, require_valid, start_session, submit_guess, validate_guess

__all__ = [
    "Attempt", "AttemptResult", "AttemptStatus", "PuzzleSession", "RowView", "SessionState",
    "pick_answer", "require_valid", "start_session", "submit_guess", "validate_guess",
    "DataUnavailable", "InvalidWord", "KanadleError", "LoadError", "SessionOver",
]
