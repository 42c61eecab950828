from .session import GameSession, GuessOutcome, SessionState, InconsistentFeedbackError

__all__ = ["GameSession", "GuessOutcome", "SessionState", "InconsistentFeedbackError"]
