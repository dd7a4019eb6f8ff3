from lexistem.regions import get_r1
from lexistem.word import Span

DOUBLES = frozenset('bdfgmnprt')


def get_last_short_syllable(word, end=None) -> Span:
    """
    Finds the rightmost short syllable within the first ``end`` characters.
    A short syllable is a vowel followed by a non-vowel other than w, x or a
    consonant y, preceded by a non-vowel; at the start of the word a vowel
    followed by any non-vowel is enough.
    :return: two character Span, or an empty Span when there is none
    """
    end = len(word) if end is None else end
    for i in range(end - 2, 0, -1):
        if (word.is_vowel_at(i) and not word.is_vowel_at(i + 1)
                and word[i + 1] not in 'wx' and not word.is_marked(i + 1)
                and not word.is_vowel_at(i - 1)):
            return Span(i, 2)

    if end >= 2 and word.is_vowel_at(0) and not word.is_vowel_at(1):
        return Span(0, 2)
    return Span(0, 0)


def ends_with_short_syllable(word, end=None) -> bool:
    end = len(word) if end is None else end
    syllable = get_last_short_syllable(word, end)
    return not syllable.is_empty() and syllable.end == end


def is_short_word(word, r1=None) -> bool:
    r1 = get_r1(word) if r1 is None else r1
    return ends_with_short_syllable(word) and r1.start >= len(word)


def ends_with_double(word) -> bool:
    return len(word) >= 2 and word[-1] == word[-2] and word[-1] in DOUBLES
