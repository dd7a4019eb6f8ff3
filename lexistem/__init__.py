"""
English (Porter2) stemmer for search indexing.

Usage:
    from lexistem import stem, Stemmer

    stem("kneeling")                        # 'kneel'
    Stemmer("english").stemWords(words)     # cached, thread-safe
"""

from lexistem.porter2 import Stemmer, VERSION, algorithms, stem, version

__all__ = ["Stemmer", "algorithms", "stem", "version"]
__version__ = VERSION
