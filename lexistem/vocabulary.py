"""
Reference vocabulary of the Porter2 algorithm.

The Snowball project publishes a list of English words (voc.txt) together
with their expected stems (output.txt). These helpers fetch the two files
and compare a stemmer against them.
"""
import logging
import os

import requests

from lexistem import config
from lexistem.errors import VocabularyError

VOCABULARY_FILE = 'voc.txt'
OUTPUT_FILE = 'output.txt'


def download_vocabulary(data_dir=None, base_url=None, force=False):
    """
    Downloads voc.txt and output.txt into data_dir, unless they are already there.
    :return: (vocabulary path, output path)
    """
    data_dir = data_dir or config.data_dir()
    base_url = (base_url or config.vocabulary_url()).rstrip('/')
    os.makedirs(data_dir, exist_ok=True)

    paths = []
    for name in (VOCABULARY_FILE, OUTPUT_FILE):
        path = os.path.join(data_dir, name)
        paths.append(path)
        if os.path.isfile(path) and not force:
            logging.debug('Using cached {}'.format(path))
            continue
        url = '{}/{}'.format(base_url, name)
        logging.info('Downloading {} ...'.format(url))
        part = path + '.part'
        try:
            response = requests.get(url, stream=True, timeout=30)
            response.raise_for_status()
            with open(part, 'wb') as f:
                for buf in response.iter_content(4096):
                    f.write(buf)
        except requests.RequestException as e:
            if os.path.exists(part):
                os.remove(part)
            raise VocabularyError('Could not download {}: {}'.format(url, e)) from e
        os.replace(part, path)
    return tuple(paths)


def _read_words(path):
    try:
        with open(path, encoding='utf-8') as f:
            return [line.strip() for line in f if line.strip()]
    except OSError as e:
        raise VocabularyError('Could not read {}: {}'.format(path, e)) from e


def load_vocabulary(vocabulary_path, output_path):
    """
    Pairs every word of the vocabulary with its expected stem.
    :return: list of (word, expected stem)
    """
    words = _read_words(vocabulary_path)
    stems = _read_words(output_path)
    if len(words) != len(stems):
        raise VocabularyError('{} has {} words but {} has {} stems'.format(
            vocabulary_path, len(words), output_path, len(stems)))
    return list(zip(words, stems))


def compare(stem_word, pairs):
    """
    Stems every word and collects the ones that differ from the expectation.
    :param stem_word:   Function from word to stem.
    :param pairs:       Iterable of (word, expected stem).
    :return: list of (word, expected stem, actual stem)
    """
    mismatches = []
    for word, expected in pairs:
        actual = stem_word(word)
        if actual != expected:
            logging.debug('{}: expected {}, got {}'.format(word, expected, actual))
            mismatches.append((word, expected, actual))
    return mismatches
