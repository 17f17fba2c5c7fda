"""
Porter stemmer for English words.

Reduces words to their stem by applying an ordered sequence of
suffix-stripping steps ("generalizations" -> "gener", "hopping" -> "hop").

Components:
- classifier: consonant/vowel primitives (measure, cvc, double consonants)
- rules: the seven suffix-stripping steps and their suffix tables
- engine: the stem() pipeline and the character-at-a-time Stemmer facade
- tokenizer: text driver (letter runs in, stems out, separators untouched)
- index_builder: stem frequency aggregation over texts
"""

from .engine import Stemmer, stem
from .tokenizer import iter_segments, stem_text, tokenize
from .index_builder import build_stem_index

__all__ = [
    "stem",
    "Stemmer",
    "iter_segments",
    "stem_text",
    "tokenize",
    "build_stem_index",
]
