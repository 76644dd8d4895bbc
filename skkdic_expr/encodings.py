"""
Character encodings used by SKK dictionary files.

Dictionaries declare their encoding with an Emacs coding cookie on the
first line:

    ;; -*- coding: euc-jp -*-
"""

import re
from enum import Enum
from typing import Optional


class Encoding(str, Enum):
    """Dictionary encodings understood on read and write."""
    AUTO = ""
    EUC_JP = "euc-jp"
    EUC_JIS_2004 = "euc-jis-2004"
    SHIFT_JIS = "shift_jis"
    ISO_2022_JP = "iso-2022-jp"
    UTF8 = "utf-8"

    @classmethod
    def parse(cls, name) -> Optional["Encoding"]:
        """
        Look up an encoding by its cookie name.

        Returns None for unrecognized names. AUTO is never returned
        from a non-empty name.
        """
        if isinstance(name, Encoding):
            return name
        if not name:
            return None
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            return None

    @property
    def is_valid(self) -> bool:
        return self is not Encoding.AUTO

    @property
    def codec(self) -> str:
        """Python codec name used to decode/encode file bytes."""
        return _CODECS.get(self, "utf-8")

    @property
    def errors(self) -> str:
        """
        Codec error handler.

        UTF-8 (and undeclared) files pass undecodable bytes through
        unchanged, the Japanese codecs are strict.
        """
        if self.codec == "utf-8":
            return "surrogateescape"
        return "strict"


_CODECS = {
    Encoding.EUC_JP: "euc_jp",
    Encoding.EUC_JIS_2004: "euc_jis_2004",
    Encoding.SHIFT_JIS: "shift_jis",
    Encoding.ISO_2022_JP: "iso2022_jp",
    Encoding.UTF8: "utf-8",
}


CODING_COOKIE_RE = re.compile(r"-\*-.*[ \t]coding:[ \t]*([^ \t;]+?)[ \t;].*-\*-")


def extract_encoding(line: str) -> Optional[Encoding]:
    """
    Read the encoding declared by a ``-*- coding: NAME -*-`` cookie.

    Returns None if the line has no cookie or names an unknown encoding.
    """
    m = CODING_COOKIE_RE.search(line)
    if m is None:
        return None
    return Encoding.parse(m.group(1))


def coding_cookie(encoding: Encoding) -> str:
    return f";; -*- coding: {encoding.value} -*-"
