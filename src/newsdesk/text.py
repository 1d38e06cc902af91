"""Normalization, tokenization and a cheap sentence splitter for news text."""
from __future__ import annotations

import re
from typing import List, Optional

# Sentence end followed by whitespace, a spaced dash (em, en or hyphen), or a bullet separator.
SPLIT_REGEX = re.compile(r"(?<=[.?!…])\s+|\s+[—–-]\s+|\s+•\s+")
# Anything but letters, digits, whitespace and hyphens becomes a space.
_STRIP_REGEX = re.compile(r"[^\w\s-]|_")


def _as_text(text) -> str:
    if text is None:
        return ""
    return text if isinstance(text, str) else str(text)


def normalize(text: Optional[str]) -> str:
    return _as_text(text).lower()


def tokenize(text: Optional[str]) -> List[str]:
    """Lowercased word tokens in order, duplicates kept."""
    return _STRIP_REGEX.sub(" ", normalize(text)).split()


def split_sentences(text: Optional[str]) -> List[str]:
    """Split on sentence punctuation, spaced dashes and ' • '.

    Heuristic only; abbreviations like "U.S. troops" split too.
    """
    out = []
    for part in SPLIT_REGEX.split(_as_text(text)):
        s = part.strip()
        if s:
            out.append(s)
    return out


__all__ = ["normalize", "tokenize", "split_sentences"]
