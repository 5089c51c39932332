"""
Text normalization and word-overlap similarity used by the matcher.
"""
import string
import unicodedata
from typing import List

# Words of this length or shorter never count as a match
MIN_WORD_LENGTH = 2


def normalize(text: str) -> str:
    """Lowercase and trim a message. Idempotent."""
    return text.lower().strip()


def _tokens(text: str) -> List[str]:
    return text.split()


def _is_punctuation(ch: str) -> bool:
    return ch in string.punctuation or unicodedata.category(ch).startswith("P")


def _bare(word: str) -> str:
    # Unicode punctuation covers the danda, full-width marks and curly quotes
    start, end = 0, len(word)
    while start < end and _is_punctuation(word[start]):
        start += 1
    while end > start and _is_punctuation(word[end - 1]):
        end -= 1
    return word[start:end]


def similarity(a: str, b: str) -> float:
    """
    Word-overlap ratio between two already-normalized strings.

    Every occurrence of a word of `a` that also appears in `b` and is longer
    than MIN_WORD_LENGTH counts once. The count is divided by the token count
    of the longer string, so short words still weigh in the denominator.
    Surrounding punctuation is ignored when comparing words; case is not.

    Returns:
        float in [0, 1]; 0 when both strings are empty
    """
    words_a = _tokens(a)
    words_b = _tokens(b)

    denominator = max(len(words_a), len(words_b))
    if denominator == 0:
        return 0.0

    bare_b = {_bare(word) for word in words_b}
    matches = 0
    for word in words_a:
        bare = _bare(word)
        if len(bare) > MIN_WORD_LENGTH and bare in bare_b:
            matches += 1

    return matches / denominator
