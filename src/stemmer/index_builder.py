"""
Stem index builder - aggregates stem frequencies across texts.
"""

import logging
from collections import defaultdict
from typing import Any, Dict, List, Optional

from .tokenizer import MAX_WORD_LENGTH, tokenize

logger = logging.getLogger(__name__)


def build_stem_index(
    texts: List[str],
    verb_pass: bool = True,
    max_word_length: Optional[int] = MAX_WORD_LENGTH,
) -> Dict[str, Any]:
    """
    Build a stem frequency index from a list of texts.

    Args:
        texts: Text strings (documents, chunks, lines...)
        verb_pass: Run the residual verb-suffix step
        max_word_length: Truncation length for letter runs

    Returns:
        Dict with structure:
        {
            "term_frequencies": {"stem1": count1, ...},
            "documents": number of texts,
            "tokens": total number of words
        }

    Example:
        >>> build_stem_index(["Hopping ponies", "pony hops"])
        {'term_frequencies': {'hop': 2, 'poni': 2}, 'documents': 2, 'tokens': 4}
    """
    term_frequencies = defaultdict(int)
    token_count = 0

    for text in texts:
        for term in tokenize(text, verb_pass=verb_pass, max_word_length=max_word_length):
            term_frequencies[term] += 1
            token_count += 1

    # Convert defaultdict to regular dict (for JSON serialization)
    result = {
        "term_frequencies": dict(term_frequencies),
        "documents": len(texts),
        "tokens": token_count,
    }

    logger.debug(f"Built stem index: {len(result['term_frequencies'])} unique stems from {len(texts)} texts")

    return result
