"""
Exceptions raised by skkdic-expr.
"""


class SkkDictError(Exception):
    """Base class for dictionary errors."""
    pass


class DictionaryReadError(SkkDictError):
    """Raised when a dictionary source cannot be read or decoded."""
    pass


class DictionaryWriteError(SkkDictError):
    """Raised when a dictionary cannot be encoded or written."""
    pass
