"""
The seven suffix-stripping steps of the stemmer.

Each step is a pure function: it takes the active word (lowercase letters)
and returns the transformed word. Steps 1-6 are the classical Porter steps;
step 7 is an extra pass over verb endings that the canonical algorithm does
not have (see engine.stem).

Steps 3, 4 and 5 dispatch through ordered suffix tables keyed by a trigger
letter (the letter before the last one for steps 3 and 5, the last letter for
step 4). Within a bucket the first matching suffix wins, even when its measure
guard then rejects the replacement.
"""

from typing import Dict, Optional, Tuple

from .classifier import (
    contains_vowel,
    cvc,
    ends_double_consonant,
    ends_with,
    measure,
    replace_if_measure_positive,
    set_to,
)

# Step 1: stems restored with a final "e" after -ed/-ing removal (conflat(ed) -> conflate)
E_RESTORING_ENDINGS = ('at', 'bl', 'iz')

# Step 1: doubled letters that are NOT undoubled after -ed/-ing removal (fall(ing) -> fall)
KEPT_DOUBLES = frozenset('lsz')

# Step 3: keyed by the penultimate letter of the word
DOUBLE_SUFFIXES: Dict[str, Tuple[Tuple[str, str], ...]] = {
    'a': (('ational', 'ate'), ('tional', 'tion')),
    'c': (('enci', 'ence'), ('anci', 'ance')),
    'e': (('izer', 'ize'),),
    'l': (('bli', 'ble'), ('alli', 'al'), ('entli', 'ent'), ('eli', 'e'), ('ousli', 'ous')),
    'o': (('ization', 'ize'), ('ation', 'ate'), ('ator', 'ate')),
    's': (('alism', 'al'), ('iveness', 'ive'), ('fulness', 'ful'), ('ousness', 'ous')),
    't': (('aliti', 'al'), ('iviti', 'ive'), ('biliti', 'ble')),
    'g': (('logi', 'log'),),
}

# Step 4: keyed by the last letter of the word
SIMPLE_SUFFIXES: Dict[str, Tuple[Tuple[str, str], ...]] = {
    'e': (('icate', 'ic'), ('ative', ''), ('alize', 'al')),
    'i': (('iciti', 'ic'),),
    'l': (('ical', 'ic'), ('ful', '')),
    's': (('ness', ''),),
}

# Step 5: keyed by the penultimate letter of the word.
# Second item: letters that must precede the suffix (None = no constraint)
CONTEXT_SUFFIXES: Dict[str, Tuple[Tuple[str, Optional[str]], ...]] = {
    'a': (('al', None),),
    'c': (('ance', None), ('ence', None)),
    'e': (('er', None),),
    'i': (('ic', None),),
    'l': (('able', None), ('ible', None)),
    'n': (('ant', None), ('ement', None), ('ment', None), ('ent', None)),
    'o': (('ion', 'st'), ('ou', None)),
    's': (('ism', None),),
    't': (('ate', None), ('iti', None)),
    'u': (('ous', None),),
    'v': (('ive', None),),
    'z': (('ize', None),),
}


def step1_plurals_and_participles(word: str) -> str:
    """
    Remove plurals and -ed/-ing endings.

        caresses -> caress    ponies  -> poni     cats      -> cat
        feed     -> feed      agreed  -> agree    plastered -> plaster
        motoring -> motor     sing    -> sing     conflated -> conflate
        hopping  -> hop       falling -> fall     filing    -> file
    """
    if word.endswith('s'):
        if word.endswith('sses') or word.endswith('ies'):
            word = word[:-2]
        elif not word.endswith('ss'):
            word = word[:-1]

    j = ends_with(word, 'eed')
    if j is not None:
        if measure(word[:j + 1]) > 0:
            word = word[:-1]
        return word

    j = ends_with(word, 'ed')
    if j is None:
        j = ends_with(word, 'ing')
    if j is None or not contains_vowel(word[:j + 1]):
        return word

    word = word[:j + 1]
    if word.endswith(E_RESTORING_ENDINGS):
        return word + 'e'
    if ends_double_consonant(word):
        if word[-1] not in KEPT_DOUBLES:
            word = word[:-1]
    elif measure(word) == 1 and cvc(word, len(word) - 1):
        word += 'e'
    return word


def step2_terminal_y(word: str) -> str:
    """Turn a terminal y into i when the rest of the word has a vowel (happy -> happi)."""
    j = ends_with(word, 'y')
    if j is not None and contains_vowel(word[:j + 1]):
        return word[:-1] + 'i'
    return word


def _replace_first_match(word: str, table: Dict[str, Tuple[Tuple[str, str], ...]], trigger: str) -> str:
    for suffix, replacement in table.get(trigger, ()):
        j = ends_with(word, suffix)
        if j is not None:
            return replace_if_measure_positive(word, j, replacement)
    return word


def step3_double_suffixes(word: str) -> str:
    """
    Map double suffixes to single ones (relational -> relate,
    hopefulness -> hopeful, sensibiliti -> sensible).
    """
    if len(word) < 2:
        return word
    return _replace_first_match(word, DOUBLE_SUFFIXES, word[-2])


def step4_suffixes(word: str) -> str:
    """Deal with -ic-, -full, -ness etc. (triplicate -> triplic, goodness -> good)."""
    if not word:
        return word
    return _replace_first_match(word, SIMPLE_SUFFIXES, word[-1])


def step5_context_suffixes(word: str) -> str:
    """
    Take off -ant, -ence etc. in context <c>vcvc<v>, i.e. only when the
    remaining stem has measure > 1 (revival -> reviv, adoption -> adopt).
    """
    if len(word) < 2:
        return word

    for suffix, preceded_by in CONTEXT_SUFFIXES.get(word[-2], ()):
        j = ends_with(word, suffix)
        if j is None:
            continue
        if preceded_by is not None and (j < 0 or word[j] not in preceded_by):
            continue
        if measure(word[:j + 1]) > 1:
            return word[:j + 1]
        return word
    return word


def step6_final_e(word: str) -> str:
    """Remove a final -e and undouble a final -ll on long enough stems."""
    if word.endswith('e'):
        m = measure(word)
        if m > 1 or (m == 1 and not cvc(word, len(word) - 2)):
            word = word[:-1]

    if word.endswith('l') and ends_double_consonant(word) and measure(word) > 1:
        word = word[:-1]
    return word


def step7_verb_suffixes(word: str) -> str:
    """
    Residual pass over verb endings, applied after the classical steps.

    The first applicable rule wins:
        -ing -> -e     if the stem has a vowel
        -ed  -> ""     if the stem has a vowel
        -es  -> -e     if m > 0
        -s   -> ""     if m > 1
        -ational -> -ate, -tional -> -tion    if m > 0
        -ing -> ""     otherwise
    """
    j = ends_with(word, 'ing')
    if j is not None and contains_vowel(word[:j + 1]):
        return set_to(word, j, 'e')

    j = ends_with(word, 'ed')
    if j is not None and contains_vowel(word[:j + 1]):
        return set_to(word, j, '')

    j = ends_with(word, 'es')
    if j is not None and measure(word[:j + 1]) > 0:
        return set_to(word, j, 'e')

    j = ends_with(word, 's')
    if j is not None and measure(word[:j + 1]) > 1:
        return set_to(word, j, '')

    for suffix, replacement in (('ational', 'ate'), ('tional', 'tion')):
        j = ends_with(word, suffix)
        if j is not None:
            return replace_if_measure_positive(word, j, replacement)

    j = ends_with(word, 'ing')
    if j is not None:
        return set_to(word, j, '')
    return word
