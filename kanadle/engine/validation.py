"""
Shape checks for a guess, independent of any word list.

A guess is well formed iff it has exactly N Symbols and each one belongs to
the input alphabet. Dictionary membership (the guess must appear in the word
list of its own leading Symbol) needs the data layer and lives in
`kanadle.session.game.validate_guess`.
"""

from typing import Sequence

from kanadle.kana import is_symbol


def is_well_formed(guess: Sequence[str], N: int) -> bool:
    if isinstance(guess, str):
        guess = list(guess)
    if len(guess) != N:
        return False
    return all(isinstance(s, str) and is_symbol(s) for s in guess)
