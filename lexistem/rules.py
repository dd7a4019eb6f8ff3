# Copyright (c) 2008 Michael Dirolf (mike at dirolf dot com)

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation
# files (the "Software"), to deal in the Software without
# restriction, including without limitation the rights to use,
# copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the
# Software is furnished to do so, subject to the following
# conditions:

# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.

# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES
# OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT
# HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY,
# WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR
# OTHER DEALINGS IN THE SOFTWARE.

"""
Suffix rules of the Porter2 algorithm, steps 0 to 5.

Every step is a table of SuffixRule entries. The longest suffix the word
ends with is selected; if its condition holds, the suffix is replaced,
otherwise the step leaves the word alone. Conditions receive the word,
the index where the suffix starts and the word's regions.
"""
import logging
from typing import Callable, NamedTuple, Optional, Union

from lexistem.syllables import ends_with_double, ends_with_short_syllable, is_short_word
from lexistem.word import MarkedWord, Span

logger = logging.getLogger(__name__)

LI_ENDINGS = frozenset('cdeghkmnrt')


class Regions(NamedTuple):
    r1: Span
    r2: Span


class SuffixRule(NamedTuple):
    suffix: str
    replacement: Union[str, Callable] = ''
    condition: Optional[Callable] = None
    then: Optional[Callable] = None


def in_r1(word, start, regions):
    return start >= regions.r1.start


def in_r2(word, start, regions):
    return start >= regions.r2.start


def preceded_by(letters, region=in_r1):
    def condition(word, start, regions):
        return start > 0 and word[start - 1] in letters and region(word, start, regions)
    return condition


def _table(*rules):
    return tuple(sorted(rules, key=lambda rule: -len(rule.suffix)))


def find_rule(word: MarkedWord, table) -> Optional[SuffixRule]:
    for rule in table:
        if word.endswith(rule.suffix):
            return rule
    return None


def apply_rules(word: MarkedWord, table, regions: Regions, step='') -> Optional[SuffixRule]:
    """
    Rewrites the word's ending with the longest matching rule of the table.
    :return: the rule that fired, or None
    """
    rule = find_rule(word, table)
    if rule is None:
        return None
    start = len(word) - len(rule.suffix)
    if rule.condition is not None and not rule.condition(word, start, regions):
        return None

    replacement = rule.replacement
    if callable(replacement):
        replacement = replacement(word, start)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug('Step {}: {} -{} +{}'.format(step, word.marked(), rule.suffix, replacement))
    word.replace_tail(len(rule.suffix), replacement)
    if rule.then is not None:
        rule.then(word, regions)
    return rule


# Step 0: possessives

STEP_0 = _table(
    SuffixRule("'s'"),
    SuffixRule("'s"),
    SuffixRule("'"),
)


# Step 1a: plurals

def _i_or_ie(word, start):
    return 'i' if start > 1 else 'ie'


def _vowel_before_previous(word, start, regions):
    return word.has_vowel(0, start - 1)


STEP_1A = _table(
    SuffixRule('sses', 'ss'),
    SuffixRule('ied', _i_or_ie),
    SuffixRule('ies', _i_or_ie),
    SuffixRule('us', 'us'),
    SuffixRule('ss', 'ss'),
    SuffixRule('s', '', _vowel_before_previous),
)


# Step 1b: -ed and -ing forms

def _has_vowel(word, start, regions):
    return word.has_vowel(0, start)


def _restore_ending(word, regions):
    if word.endswith('at') or word.endswith('bl') or word.endswith('iz'):
        word.replace_tail(0, 'e')
    elif ends_with_double(word):
        word.replace_tail(1)
    elif is_short_word(word, regions.r1):
        word.replace_tail(0, 'e')


STEP_1B = _table(
    SuffixRule('eed', 'ee', in_r1),
    SuffixRule('eedly', 'ee', in_r1),
    SuffixRule('ed', '', _has_vowel, _restore_ending),
    SuffixRule('edly', '', _has_vowel, _restore_ending),
    SuffixRule('ing', '', _has_vowel, _restore_ending),
    SuffixRule('ingly', '', _has_vowel, _restore_ending),
)


# Step 1c: final y

def _after_inner_consonant(word, start, regions):
    return start > 1 and not word.is_vowel_at(start - 1)


STEP_1C = _table(
    SuffixRule('y', 'i', _after_inner_consonant),
)


# Step 2: derivational suffixes in R1

STEP_2 = _table(
    SuffixRule('tional', 'tion', in_r1),
    SuffixRule('enci', 'ence', in_r1),
    SuffixRule('anci', 'ance', in_r1),
    SuffixRule('abli', 'able', in_r1),
    SuffixRule('entli', 'ent', in_r1),
    SuffixRule('izer', 'ize', in_r1),
    SuffixRule('ization', 'ize', in_r1),
    SuffixRule('ational', 'ate', in_r1),
    SuffixRule('ation', 'ate', in_r1),
    SuffixRule('ator', 'ate', in_r1),
    SuffixRule('alism', 'al', in_r1),
    SuffixRule('aliti', 'al', in_r1),
    SuffixRule('alli', 'al', in_r1),
    SuffixRule('fulness', 'ful', in_r1),
    SuffixRule('ousli', 'ous', in_r1),
    SuffixRule('ousness', 'ous', in_r1),
    SuffixRule('iveness', 'ive', in_r1),
    SuffixRule('iviti', 'ive', in_r1),
    SuffixRule('biliti', 'ble', in_r1),
    SuffixRule('bli', 'ble', in_r1),
    SuffixRule('ogi', 'og', preceded_by('l')),
    SuffixRule('fulli', 'ful', in_r1),
    SuffixRule('lessli', 'less', in_r1),
    SuffixRule('li', '', preceded_by(LI_ENDINGS)),
)


# Step 3: more suffixes in R1, -ative in R2

STEP_3 = _table(
    SuffixRule('tional', 'tion', in_r1),
    SuffixRule('ational', 'ate', in_r1),
    SuffixRule('alize', 'al', in_r1),
    SuffixRule('icate', 'ic', in_r1),
    SuffixRule('iciti', 'ic', in_r1),
    SuffixRule('ical', 'ic', in_r1),
    SuffixRule('ful', '', in_r1),
    SuffixRule('ness', '', in_r1),
    SuffixRule('ative', '', in_r2),
)


# Step 4: suffixes deleted in R2

STEP_4 = _table(
    *(SuffixRule(suffix, '', in_r2) for suffix in (
        'al', 'ance', 'ence', 'er', 'ic', 'able', 'ible', 'ant', 'ement',
        'ment', 'ent', 'ism', 'ate', 'iti', 'ous', 'ive', 'ize')),
    SuffixRule('ion', '', preceded_by('st', region=in_r2)),
)


# Step 5: final e and l

def _removable_e(word, start, regions):
    if in_r2(word, start, regions):
        return True
    return in_r1(word, start, regions) and not ends_with_short_syllable(word, start)


STEP_5 = _table(
    SuffixRule('e', '', _removable_e),
    SuffixRule('l', '', preceded_by('l', region=in_r2)),
)


def step_0(word, regions):
    return apply_rules(word, STEP_0, regions, '0')


def step_1a(word, regions):
    return apply_rules(word, STEP_1A, regions, '1a')


def step_1b(word, regions):
    return apply_rules(word, STEP_1B, regions, '1b')


def step_1c(word, regions):
    return apply_rules(word, STEP_1C, regions, '1c')


def step_2(word, regions):
    return apply_rules(word, STEP_2, regions, '2')


def step_3(word, regions):
    return apply_rules(word, STEP_3, regions, '3')


def step_4(word, regions):
    return apply_rules(word, STEP_4, regions, '4')


def step_5(word, regions):
    return apply_rules(word, STEP_5, regions, '5')


STEPS = (step_0, step_1a, step_1b, step_1c, step_2, step_3, step_4, step_5)
