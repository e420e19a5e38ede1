from .table import (
    EXCLUDED_LEADING,
    ROMAJI_TABLE,
    SMALL_SYMBOLS,
    SYMBOLS,
    is_symbol,
    leading_symbols,
    lookup,
)
from .input import InputStep, feed, transliterate

__all__ = [
    "EXCLUDED_LEADING", "ROMAJI_TABLE", "SMALL_SYMBOLS", "SYMBOLS",
    "is_symbol", "leading_symbols", "lookup", "InputStep", "feed", "transliterate",
]
