from .validator import validate_wordlists, pretty_summary
from .io import read_lines, write_lines, load_words
from .frequency import read_frequency_table
from .cache import read_permutation_cache, write_permutation_cache

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "write_lines", "load_words",
    "read_frequency_table",
    "read_permutation_cache", "write_permutation_cache",
]
