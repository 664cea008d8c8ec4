# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: TextNormalizer
# -----------------------------------------------------------------------------
import re
from typing import Optional

_SINGLE_QUOTES = re.compile("[‘’´`]")
_DOUBLE_QUOTES = re.compile("[“”]")
_UNICODE_SPACES = re.compile("[\u00a0\u2000-\u200f\u2028-\u202f\u205f\u2060\u3000]")
_DASHES = re.compile("[—–]")
_WHITESPACE = re.compile(r"\s+")


def normalize_text(text: Optional[str]) -> str:
    """
    Canonicalise free text before embedding.

      - curly / backtick / acute single quotes -> '
      - curly double quotes -> "
      - non-breaking and other Unicode space/separator code points -> ' '
      - em-dash and en-dash -> -
      - whitespace runs collapsed to one space, ends trimmed
    """
    if not text:
        return ""

    text = _SINGLE_QUOTES.sub("'", text)
    text = _DOUBLE_QUOTES.sub('"', text)
    text = _UNICODE_SPACES.sub(" ", text)
    text = _DASHES.sub("-", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()
