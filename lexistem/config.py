import logging
import os

DEFAULT_CACHE_SIZE = 10000
DEFAULT_VOCABULARY_URL = 'https://raw.githubusercontent.com/snowballstem/snowball-data/master/english'


def cache_size() -> int:
    value = os.environ.get('LEXISTEM_CACHE_SIZE')
    if value is None:
        return DEFAULT_CACHE_SIZE
    try:
        return max(int(value), 0)
    except ValueError:
        logging.warning('Invalid LEXISTEM_CACHE_SIZE {!r}, using {}'.format(value, DEFAULT_CACHE_SIZE))
        return DEFAULT_CACHE_SIZE


def data_dir():
    return os.environ.get('LEXISTEM_DATA_DIR', os.path.join('data', 'porter2'))


def vocabulary_url():
    return os.environ.get('LEXISTEM_VOCABULARY_URL', DEFAULT_VOCABULARY_URL).rstrip('/')


def log_level():
    value = os.environ.get('LEXISTEM_LOG_LEVEL', 'WARNING').upper()
    if not isinstance(logging.getLevelName(value), int):
        logging.warning('Invalid LEXISTEM_LOG_LEVEL {!r}, using WARNING'.format(value))
        return 'WARNING'
    return value
