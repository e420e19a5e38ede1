from .core import GameRecord, collect_words, run_case, run_batch, summarize
from .io import write_attempts_csv, write_manifest

__all__ = ["GameRecord", "collect_words", "run_case", "run_batch", "summarize",
           "write_attempts_csv", "write_manifest"]
