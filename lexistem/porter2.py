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

"""An implementation of the Porter2 stemming algorithm.

See https://snowballstem.org/algorithms/english/stemmer.html"""
import threading
from collections import OrderedDict

from lexistem import config
from lexistem.regions import get_r2, word_r1
from lexistem.rules import Regions, STEPS, step_0, step_1a
from lexistem.word import clean_word

VERSION = '1.0.0'

exceptional_forms = {'skis': 'ski',
                     'skies': 'sky',
                     'dying': 'die',
                     'lying': 'lie',
                     'tying': 'tie',
                     'idly': 'idl',
                     'gently': 'gentl',
                     'ugly': 'ugli',
                     'early': 'earli',
                     'only': 'onli',
                     'singly': 'singl',
                     'sky': 'sky',
                     'news': 'news',
                     'howe': 'howe',
                     'atlas': 'atlas',
                     'cosmos': 'cosmos',
                     'bias': 'bias',
                     'andes': 'andes'}

exceptional_early_exit_post_1a = frozenset(['inning', 'outing', 'canning', 'herring', 'earring',
                                            'proceed', 'exceed', 'succeed'])


def stem(word: str) -> str:
    """
    Converts an English word to its stem: kneeling -> kneel.
    The word must already be lowercase ASCII, as upstream tokenizers deliver it;
    other input is not rejected but gives meaningless stems.
    """
    if len(word) <= 2:
        return word

    buffer = clean_word(word)
    # handle some exceptional forms
    if str(buffer) in exceptional_forms:
        return exceptional_forms[str(buffer)]

    r1 = word_r1(buffer)
    regions = Regions(r1, get_r2(buffer, r1))
    step_0(buffer, regions)
    step_1a(buffer, regions)

    # handle some more exceptional forms
    if str(buffer) in exceptional_early_exit_post_1a:
        return str(buffer)

    for step in STEPS[2:]:
        step(buffer, regions)
    return str(buffer)


def algorithms():
    """Get a list of the names of the available stemming algorithms.

    The only algorithm currently supported is the "english", or porter2,
    algorithm.
    """
    return ['english']


def version():
    """Get the version number of the stemming module."""
    return VERSION


class Stemmer:
    """An instance of a stemming algorithm.

    When creating a Stemmer object, the name of the algorithm may be given;
    "english" and its ISO 639 codes "eng" and "en" are accepted. Stems are
    memoized in a bounded cache owned by the instance, so a single Stemmer
    can be shared between threads of an indexing pipeline.
    """

    def __init__(self, algorithm='english', cache_size=None):
        if algorithm not in ['english', 'eng', 'en']:
            raise KeyError("Stemming algorithm '%s' not found" % algorithm)
        self.max_cache_size = config.cache_size() if cache_size is None else max(cache_size, 0)
        self._cache = OrderedDict()
        self._lock = threading.Lock()

    def stemWord(self, word):
        """Stem a single lowercase word."""
        if not self.max_cache_size:
            return stem(word)
        with self._lock:
            if word in self._cache:
                self._cache.move_to_end(word)
                return self._cache[word]

        result = stem(word)
        with self._lock:
            self._cache[word] = result
            if len(self._cache) > self.max_cache_size:
                self._cache.popitem(last=False)
        return result

    def stemWords(self, words):
        """Stem a list of words.

        This takes a single argument, words, which may be a sequence,
        iterator, generator or similar. The result is a list of the stemmed
        forms of the words.
        """
        return [self.stemWord(word) for word in words]

    def cache_info(self):
        with self._lock:
            return {'size': len(self._cache), 'max_size': self.max_cache_size}
