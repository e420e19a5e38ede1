"""Error taxonomy. Every one of these is recoverable; none corrupts a session."""

from __future__ import annotations


class KanadleError(Exception):
    pass


class LoadError(KanadleError):
    """A word list could not be read or parsed."""

    def __init__(self, symbol: str, path, reason: str = ""):
        self.symbol = symbol
        self.path = path
        self.reason = reason
        super().__init__(f"failed to load word list for {symbol!r} from {path}: {reason}")


class DataUnavailable(KanadleError):
    """No usable answer exists for the chosen leading symbol(s)."""

    def __init__(self, symbol: str | None = None, message: str | None = None):
        self.symbol = symbol
        super().__init__(message or f"no answers available for leading symbol {symbol!r}")


class InvalidWord(KanadleError):
    """The guess is not in the word list of its own leading symbol."""

    def __init__(self, guess: str):
        self.guess = guess
        super().__init__(f"not a known word: {guess!r}")


class SessionOver(KanadleError):
    """A guess was submitted after the session reached a terminal state."""
