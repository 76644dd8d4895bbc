"""
skkdic-expr: SKK dictionary merging

Reads SKK-JISYO style dictionaries and combines them with union,
difference and intersection, then writes the result back out with
okuri-ari entries in descending and okuri-nasi entries in ascending
headword order.

Basic Usage:
    import skkdic_expr
    from skkdic_expr import MergeMode

    dic = skkdic_expr.load("SKK-JISYO.L", "SKK-JISYO.jinmei")
    dic.read_file("SKK-JISYO.ng", MergeMode.SUB)

    print(dic.lookup("さしみ"))
    print(dic.complete("さし"))
    dic.write_file("SKK-JISYO.merged")
"""

from pathlib import Path
from typing import Optional, Union

__version__ = "0.1.0"

from skkdic_expr.candidates import (
    Candidate,
    join_candidates,
    parse_candidates,
    parse_line,
)
from skkdic_expr.characters import is_okuri_ari
from skkdic_expr.dictionary import (
    Dictionary,
    MergeMode,
    ReadOptions,
    ReadStats,
    WriteOptions,
)
from skkdic_expr.encodings import Encoding, extract_encoding
from skkdic_expr.exceptions import (
    DictionaryReadError,
    DictionaryWriteError,
    SkkDictError,
)


def load(*paths: Union[str, Path], delimiter: Optional[str] = None,
         encoding: Union[Encoding, str] = Encoding.AUTO) -> Dictionary:
    """
    Build a Dictionary from the union of one or more files.

    Args:
        paths: Dictionary files, merged in order
        delimiter: Annotation delimiter (default from settings)
        encoding: Input encoding, AUTO to read each file's coding cookie

    Returns:
        The merged Dictionary
    """
    dic = Dictionary(delimiter)
    options = ReadOptions(encoding)
    for path in paths:
        dic.read_file(path, MergeMode.ADD, options)
    return dic


def get_version() -> str:
    """Get the library version."""
    return __version__


__all__ = [
    # Data classes
    "Candidate",
    "Dictionary",
    "MergeMode",
    "ReadOptions",
    "ReadStats",
    "WriteOptions",
    "Encoding",
    # Functions
    "load",
    "get_version",
    "parse_candidates",
    "parse_line",
    "join_candidates",
    "is_okuri_ari",
    "extract_encoding",
    # Exceptions
    "SkkDictError",
    "DictionaryReadError",
    "DictionaryWriteError",
    # Version
    "__version__",
]
