"""
R1 and R2 regions of a word.

R1 is the part of the word after the first non-vowel following a vowel,
R2 is R1 of R1. Both are returned as spans and may be empty.
"""
from lexistem.word import Span

# prefixes that fix R1 regardless of the vowel scan
EXCEPTIONAL_R1_PREFIXES = ('gener', 'commun', 'arsen')


def get_r1(word, span=None) -> Span:
    if span is None:
        span = Span(0, len(word))
    end = span.end
    for i in range(span.start, end - 1):
        if word.is_vowel_at(i) and not word.is_vowel_at(i + 1):
            return Span.between(i + 2, end)
    return Span(end, 0)


def get_r2(word, r1=None) -> Span:
    return get_r1(word, get_r1(word) if r1 is None else r1)


def word_r1(word) -> Span:
    """R1 as the stemmer uses it, honouring the gener/commun/arsen prefixes."""
    text = str(word)
    for prefix in EXCEPTIONAL_R1_PREFIXES:
        if text.startswith(prefix):
            return Span.between(len(prefix), len(word))
    return get_r1(word)
