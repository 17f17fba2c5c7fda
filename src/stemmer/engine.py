"""
Porter stemming pipeline.

Two ways to stem:
- stem(word): stateless function, safe to share across threads and tasks
- Stemmer: character-at-a-time facade (add, stem, read back the result)

The pipeline runs steps 1-6 of the Porter algorithm followed by an extra
verb-suffix pass (step 7). Pass verb_pass=False for the canonical six-step
algorithm; the two variants disagree on words like "feed" or "caress".

Input must be lowercase ASCII letters. The engine does not validate this:
uppercase or non-letter characters give unspecified stems, they never raise.
"""

from typing import Callable, List, Optional, Sequence, Tuple

from .rules import (
    step1_plurals_and_participles,
    step2_terminal_y,
    step3_double_suffixes,
    step4_suffixes,
    step5_context_suffixes,
    step6_final_e,
    step7_verb_suffixes,
)

# Words this short are returned unchanged
MIN_STEMMABLE_LENGTH = 3

CANONICAL_STEPS: Tuple[Callable[[str], str], ...] = (
    step1_plurals_and_participles,
    step2_terminal_y,
    step3_double_suffixes,
    step4_suffixes,
    step5_context_suffixes,
    step6_final_e,
)


def stem(word: str, verb_pass: bool = True) -> str:
    """
    Stem a single lowercase word.

    Args:
        word: Lowercase ASCII letters
        verb_pass: Run the residual verb-suffix step after the canonical steps

    Returns:
        Stemmed word, never longer than the input

    Examples:
        >>> stem("generalizations")
        'gener'
        >>> stem("caresses")
        'cares'
        >>> stem("caresses", verb_pass=False)
        'caress'
    """
    if len(word) < MIN_STEMMABLE_LENGTH:
        return word

    for step in CANONICAL_STEPS:
        word = step(word)
    if verb_pass:
        word = step7_verb_suffixes(word)
    return word


class Stemmer:
    """
    Accumulates a word letter by letter and stems it.

    Not thread-safe: the pending buffer belongs to one caller. Use the
    module-level stem() function for concurrent work.

    Example:
        >>> s = Stemmer()
        >>> s.add_chars("ponies")
        >>> s.stem()
        'poni'
        >>> s.result_length()
        4
    """

    def __init__(self, verb_pass: bool = True):
        self.verb_pass = verb_pass
        self._buffer: List[str] = []
        self._result = ""

    def add(self, ch: str) -> None:
        """Add one letter to the word being stemmed."""
        self._buffer.append(ch)

    def add_chars(self, chars: Sequence[str], length: Optional[int] = None) -> None:
        """
        Add the first `length` letters of chars (all of them if length is None).
        """
        if length is not None:
            chars = chars[:length]
        self._buffer.extend(chars)

    def stem(self) -> str:
        """Stem the pending letters, clear them and return the stem."""
        self._result = stem(''.join(self._buffer), verb_pass=self.verb_pass)
        self._buffer = []
        return self._result

    def result_text(self) -> str:
        return self._result

    def result_buffer(self) -> List[str]:
        return list(self._result)

    def result_length(self) -> int:
        return len(self._result)

    def __str__(self) -> str:
        return self._result
