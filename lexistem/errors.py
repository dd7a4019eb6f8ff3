class StemmerError(Exception):
    def __init__(self, message):
        super(StemmerError, self).__init__(message)


class VocabularyError(StemmerError):
    """Raised when a reference vocabulary can't be read or downloaded."""
