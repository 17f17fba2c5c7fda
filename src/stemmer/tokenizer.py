"""
Text driver for the stemmer.

Stemming pipeline over free text:
1. Split text into maximal runs of ASCII letters and everything in between
2. Lowercase letter runs
3. Truncate overlong runs to MAX_WORD_LENGTH letters
4. Stem each run
5. Re-emit stems with the in-between characters untouched

Non-ASCII letters ("é", "ß") are treated as separators and copied verbatim.
"""

import re
from typing import Iterator, List, Optional, Tuple

from .engine import stem

# Letter runs longer than this keep only their first MAX_WORD_LENGTH letters
MAX_WORD_LENGTH = 500

SEGMENT_PATTERN = re.compile(r'(?P<word>[A-Za-z]+)|(?P<other>[^A-Za-z]+)')


def iter_segments(text: str, max_word_length: Optional[int] = MAX_WORD_LENGTH) -> Iterator[Tuple[bool, str]]:
    """
    Split text into letter runs and separators.

    Args:
        text: Input text
        max_word_length: Truncation length for letter runs (None = no limit)

    Yields:
        (is_word, segment) pairs; word segments are lowercased and truncated

    Examples:
        >>> list(iter_segments("Cats, dogs!"))
        [(True, 'cats'), (False, ', '), (True, 'dogs'), (False, '!')]
    """
    for match in SEGMENT_PATTERN.finditer(text):
        word = match.group('word')
        if word is None:
            yield False, match.group('other')
            continue
        word = word.lower()
        if max_word_length is not None:
            word = word[:max_word_length]
        yield True, word


def stem_text(text: str, verb_pass: bool = True, max_word_length: Optional[int] = MAX_WORD_LENGTH) -> str:
    """
    Replace every word of a text with its stem.

    Examples:
        >>> stem_text("Cats, ponies & caresses!")
        'cat, poni & cares!'
    """
    return ''.join(
        stem(segment, verb_pass=verb_pass) if is_word else segment
        for is_word, segment in iter_segments(text, max_word_length)
    )


def tokenize(text: str, verb_pass: bool = True, max_word_length: Optional[int] = MAX_WORD_LENGTH) -> List[str]:
    """
    Extract the stems of all words of a text, in order.

    Examples:
        >>> tokenize("Generalizations about hopping ponies")
        ['gener', 'about', 'hop', 'poni']

        >>> tokenize("42 -- ?")
        []
    """
    if not text:
        return []
    return [
        stem(segment, verb_pass=verb_pass)
        for is_word, segment in iter_segments(text, max_word_length)
        if is_word
    ]
