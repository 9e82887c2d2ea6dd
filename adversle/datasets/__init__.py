from .validator import validate_wordlists, pretty_summary
from .io import read_lines, read_words, write_lines
from .wordlists import Lexicon, build_targets, default_lexicon, load_lexicon

__all__ = [
    "validate_wordlists", "pretty_summary",
    "read_lines", "read_words", "write_lines",
    "Lexicon", "build_targets", "default_lexicon", "load_lexicon",
]
