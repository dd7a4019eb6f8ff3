"""
Marked word buffer used while stemming a single word.

A ``y`` that behaves as a consonant (at the start of a word or right after
a vowel) is recorded in a mask parallel to the characters instead of being
rewritten in place, so the buffer always holds the literal letters.
"""
from typing import NamedTuple

VOWELS = frozenset('aeiouy')


def is_vowel(c: str, marked=False) -> bool:
    """Returns True for a, e, i, o, u and an unmarked y."""
    return not marked and c in VOWELS


class Span(NamedTuple):
    """A (start, length) view into a MarkedWord, used for regions and syllables."""
    start: int
    length: int

    @classmethod
    def between(cls, start, end):
        return cls(start, end - start)

    @property
    def end(self):
        return self.start + self.length

    def is_empty(self):
        return self.length == 0

    def text(self, word):
        return ''.join(word.chars[self.start:self.end])


class MarkedWord:
    """Mutable characters plus a mask of the y's to treat as consonants."""

    __slots__ = ('chars', 'marks')

    def __init__(self, word, marks=None):
        self.chars = list(word)
        self.marks = list(marks) if marks is not None else [False] * len(self.chars)

    def __len__(self):
        return len(self.chars)

    def __getitem__(self, index):
        return self.chars[index]

    def __str__(self):
        return ''.join(self.chars)

    def __repr__(self):
        return 'MarkedWord({!r})'.format(self.marked())

    def marked(self) -> str:
        """Renders marked consonant y's as upper case Y, e.g. 'boY'."""
        return ''.join('Y' if mark else c for c, mark in zip(self.chars, self.marks))

    def is_marked(self, index) -> bool:
        return self.marks[index]

    def is_vowel_at(self, index) -> bool:
        return is_vowel(self.chars[index], self.marks[index])

    def has_vowel(self, start=0, end=None) -> bool:
        end = len(self.chars) if end is None else end
        return any(self.is_vowel_at(i) for i in range(start, end))

    def endswith(self, suffix) -> bool:
        n = len(suffix)
        return n <= len(self.chars) and ''.join(self.chars[len(self.chars) - n:]) == suffix

    def replace_tail(self, length, replacement=''):
        """Drops the last ``length`` characters and appends ``replacement`` unmarked."""
        keep = len(self.chars) - length
        del self.chars[keep:]
        del self.marks[keep:]
        self.chars.extend(replacement)
        self.marks.extend([False] * len(replacement))


def clean_word(word: str) -> MarkedWord:
    """
    Prepares a lowercase word for stemming.
    Words of two letters or less are kept as they are. Otherwise a leading
    apostrophe is dropped, and a y at the start of the word or following
    a vowel is marked as a consonant.
    :param word:    Lowercase ASCII word.
    :return: MarkedWord
    """
    if len(word) <= 2:
        return MarkedWord(word)
    if word.startswith("'"):
        word = word[1:]

    buffer = MarkedWord(word)
    if buffer.chars and buffer.chars[0] == 'y':
        buffer.marks[0] = True
    for i in range(1, len(buffer)):
        if buffer.chars[i] == 'y' and buffer.is_vowel_at(i - 1):
            buffer.marks[i] = True
    return buffer
