"""
Headword classification.

SKK dictionaries are split into okuri-ari entries (verb and adjective
stems followed by a romanized okurigana letter, e.g. ``おくr``) and
okuri-nasi entries (everything else).
"""

MAX_ASCII = 0x7F

# Prefix/suffix markers, e.g. ">し" or "#ばん"
HEADWORD_MARKERS = (">", "#")


def is_okuri_ari(headword: str) -> bool:
    """
    Check whether a headword belongs to the okuri-ari partition.

    One leading ``>`` or ``#`` marker is ignored. The headword must then
    start with a non-ASCII character and contain a lowercase ASCII
    letter somewhere after it.

    Example:
        >>> is_okuri_ari("おくr")
        True
        >>> is_okuri_ari("おく")
        False
        >>> is_okuri_ari("abc")
        False
    """
    if not headword:
        return False

    if headword[0] in HEADWORD_MARKERS:
        headword = headword[1:]
        if not headword:
            return False

    if ord(headword[0]) <= MAX_ASCII:
        return False

    return any("a" <= ch <= "z" for ch in headword)
