"""
Shared fixtures for skkdic-expr tests.
"""

import pytest

from skkdic_expr import Dictionary


@pytest.fixture
def dic():
    """An empty dictionary with the default delimiter."""
    return Dictionary(",")


@pytest.fixture
def write_jisyo(tmp_path):
    """Write a dictionary file and return its path."""
    def _write(name, lines, encoding="utf-8", cookie=True):
        path = tmp_path / name
        body = ""
        if cookie:
            body += f";; -*- coding: {encoding} -*-\n"
        body += "".join(line + "\n" for line in lines)
        codec = {"euc-jp": "euc_jp", "iso-2022-jp": "iso2022_jp"}.get(encoding, encoding)
        path.write_bytes(body.encode(codec))
        return path
    return _write
