from .models import AnswerEntry
from .io import load_word_list, read_word_list, write_word_list, word_list_path
from .cache import WordListCache
from .validator import validate_wordlists, pretty_summary

__all__ = ["AnswerEntry", "load_word_list", "read_word_list", "write_word_list",
           "word_list_path", "WordListCache", "validate_wordlists", "pretty_summary"]
