from .scoring import Verdict, evaluate, score, to_pattern, is_win
from .constraints import filter_candidates, is_consistent
from .validation import is_well_formed

__all__ = ["Verdict", "evaluate", "score", "to_pattern", "is_win",
           "filter_candidates", "is_consistent", "is_well_formed"]
