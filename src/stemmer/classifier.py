"""
Letter classification primitives for the Porter stemmer.

Every word is viewed as a pattern of consonant (C) and vowel (V) runs:

    [C](VC){m}[V]

where m is the "measure" of the word. All rules of the stemmer are gated on
these primitives, so they are kept small and free of side effects:
- consonant_mask: C/V classification of every letter (y depends on context)
- measure: number of VC sequences
- contains_vowel, has_double_consonant, cvc: the remaining rule guards
- ends_with / set_to / replace_if_measure_positive: suffix matching and splicing

Input must be lowercase ASCII letters. Other characters are not checked and
are classified as consonants.
"""

from typing import List, Optional

VOWELS = frozenset('aeiou')

# A CVC ending restores a final "e" only if the last consonant is not one of these
NON_RESTORING_CONSONANTS = frozenset('wxy')


def consonant_mask(word: str) -> List[bool]:
    """
    Classify every letter of a word as consonant (True) or vowel (False).

    "y" is a consonant at the start of a word and otherwise takes the opposite
    class of the letter before it ("toy" -> C V C, "syzygy" -> C V C V C V).

    Args:
        word: Lowercase letters

    Returns:
        One boolean per letter

    Examples:
        >>> consonant_mask("toy")
        [True, False, True]
    """
    mask = []
    for i, ch in enumerate(word):
        if ch in VOWELS:
            mask.append(False)
        elif ch == 'y':
            mask.append(True if i == 0 else not mask[i - 1])
        else:
            mask.append(True)
    return mask


def is_consonant(word: str, i: int) -> bool:
    """Check if the letter at index i is a consonant."""
    return consonant_mask(word[:i + 1])[i]


def measure(stem: str) -> int:
    """
    Count VC sequences in a stem (Porter's m).

    Examples:
        tr, ee, tree, y, by          -> 0
        trouble, oats, trees, ivy    -> 1
        troubles, private, oaten     -> 2
    """
    mask = consonant_mask(stem)
    return sum(1 for i in range(1, len(mask)) if mask[i] and not mask[i - 1])


def contains_vowel(stem: str) -> bool:
    """Check if any letter of the stem is a vowel."""
    return not all(consonant_mask(stem))


def has_double_consonant(word: str, x: int) -> bool:
    """Check if word[x-1], word[x] are the same consonant."""
    if x < 1 or word[x] != word[x - 1]:
        return False
    return is_consonant(word, x)


def ends_double_consonant(word: str) -> bool:
    """Check if the word ends with a doubled consonant ("hopp", "fizz")."""
    return has_double_consonant(word, len(word) - 1)


def cvc(word: str, i: int) -> bool:
    """
    Check if word[i-2], word[i-1], word[i] form consonant-vowel-consonant
    and word[i] is not w, x or y.

    Used to restore an "e" on short stems: cav(e), lov(e), hop(e), crim(e),
    but not snow, box, tray.
    """
    if i < 2:
        return False
    mask = consonant_mask(word[:i + 1])
    if not mask[i] or mask[i - 1] or not mask[i - 2]:
        return False
    return word[i] not in NON_RESTORING_CONSONANTS


def ends_with(word: str, suffix: str) -> Optional[int]:
    """
    Match a suffix against the end of a word.

    Args:
        word: Active word (buffer[0..k])
        suffix: Candidate suffix

    Returns:
        Match boundary j = k - len(suffix) (index of the last stem letter,
        -1 for an empty stem), or None if the word does not end with suffix
    """
    if len(suffix) > len(word) or not word.endswith(suffix):
        return None
    return len(word) - 1 - len(suffix)


def set_to(word: str, j: int, replacement: str) -> str:
    """Replace everything after the match boundary j with replacement."""
    return word[:j + 1] + replacement


def replace_if_measure_positive(word: str, j: int, replacement: str) -> str:
    """Apply set_to only if the stem word[0..j] has measure > 0."""
    if measure(word[:j + 1]) > 0:
        return set_to(word, j, replacement)
    return word
