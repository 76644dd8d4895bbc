"""
Settings and defaults for skkdic-expr.

Values can be overridden from the environment.
"""

import os

# Joins differing annotations of the same candidate text
DEFAULT_DELIMITER = os.environ.get("SKKDIC_DELIMITER", ",")

# Encoding written to the coding cookie and used for output bytes
DEFAULT_OUTPUT_ENCODING = os.environ.get("SKKDIC_OUTPUT_ENCODING", "utf-8")

# Debug mode
DEBUG = os.environ.get("SKKDIC_DEBUG", "").lower() in ("1", "true", "yes")

# Largest code point, appended to a prefix to bound completion scans
MAX_RUNE = "\U0010FFFF"

COMMENT_PREFIX = ";"
OKURI_ARI_HEADER = ";; okuri-ari entries."
OKURI_NASI_HEADER = ";; okuri-nasi entries."
